"""Article Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ArticleResponse(BaseModel):
    """Article response model."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    title: str = ""
    slug: str
    author: str = "Unknown"
    published_date: datetime
    content: str = ""
    excerpt: str = ""
    category: str = "Uncategorized"
    subcategory: str | None = None
    tags: list[str] = Field(default_factory=list)
    source: str | None = None
    image: str | None = None
    image_caption: str | None = None
    image_alt: str | None = None
    image_credit: str | None = None
    pdf_url: str | None = None
    author_bio: str | None = None
    is_featured: bool = False
    mongo_id: str | None = None
    created_at: datetime | None = None


class MessageResponse(BaseModel):
    """Error body: `{"message": ...}`."""

    message: str


class HealthResponse(BaseModel):
    """Envelope used by the health endpoints."""

    success: bool = True
    message: str | None = None
    data: dict
