"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from news_api.models.article import HealthResponse
from news_api.routers.articles import get_store
from news_api.store import ArticleStore

router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", response_model=HealthResponse)
async def health():
    """Process liveness."""
    return HealthResponse(message="API is running", data={"timestamp": _now()})


@router.get("/db", response_model=HealthResponse, response_model_exclude_none=True)
async def health_db(store: Annotated[ArticleStore, Depends(get_store)]):
    """Round-trip to the article store."""
    store.ping()
    return HealthResponse(data={"database": "connected", "timestamp": _now()})


@router.get("/cors", response_model=HealthResponse)
async def health_cors(request: Request):
    """Echo the request origin so CORS setups can be checked from a browser."""
    return HealthResponse(
        message="CORS is working properly",
        data={"origin": request.headers.get("origin", "No origin header"), "timestamp": _now()},
    )
