"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.cli_helpers import setup_logging
from common.errors import ConfigurationError, StoreError
from news_api.config import APIConfig, get_config
from news_api.routers import articles, health
from news_api.store import ArticleStore, build_store

logger = logging.getLogger(__name__)


def create_app(config: APIConfig | None = None, store: ArticleStore | None = None) -> FastAPI:
    """Build the app around an explicitly constructed article store.

    Args:
        config: API config (loaded from NEWS_API_CONFIG when omitted)
        store: Store to serve from (built from config when omitted)
    """
    config = config or get_config()
    store = store or build_store(config)

    app = FastAPI(
        title="LegalNest API",
        description="Read-only REST API for legal news articles",
        version="1.0.0",
    )
    app.state.store = store

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_origin_regex=config.cors.origin_regex,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        allow_credentials=True,
        max_age=config.cors.max_age,
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store error on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"message": str(exc)})

    app.include_router(health.router)
    app.include_router(articles.router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "LegalNest API",
            "version": "1.0.0",
            "docs": "/docs",
        }

    return app


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    try:
        config = get_config()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    uvicorn.run(
        "news_api.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
