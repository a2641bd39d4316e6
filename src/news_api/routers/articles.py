"""Article API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from news_api.models.article import ArticleResponse, MessageResponse
from news_api.services.article_service import ArticleService
from news_api.store import ArticleStore

router = APIRouter(prefix="/articles", tags=["articles"])


def get_store(request: Request) -> ArticleStore:
    """Dependency to get the store owned by the app."""
    return request.app.state.store


def get_article_service(store: Annotated[ArticleStore, Depends(get_store)]) -> ArticleService:
    """Dependency to get article service."""
    return ArticleService(store)


ServiceDep = Annotated[ArticleService, Depends(get_article_service)]


@router.get("", response_model=list[ArticleResponse])
async def list_articles(service: ServiceDep):
    """List all articles, newest first."""
    return service.list_articles()


@router.get("/featured", response_model=list[ArticleResponse])
async def list_featured_articles(
    service: ServiceDep,
    limit: Annotated[str | None, Query(description="Max results (default 5)")] = None,
):
    """List the most recent articles.

    Despite the name this is not filtered on `is_featured`.
    """
    return service.list_featured(limit)


@router.get("/category/{category_slug}", response_model=list[ArticleResponse])
async def list_articles_by_category(category_slug: str, service: ServiceDep):
    """List articles whose category or tags match the category slug."""
    return service.list_by_category(category_slug)


@router.get(
    "/category/{category_slug}/subcategory/{subcategory_slug}",
    response_model=list[ArticleResponse],
)
async def list_articles_by_subcategory(
    category_slug: str,
    subcategory_slug: str,
    service: ServiceDep,
):
    """List articles in a category whose subcategory or tags match."""
    return service.list_by_category_and_subcategory(category_slug, subcategory_slug)


@router.get("/related/{category}", response_model=list[ArticleResponse])
async def list_related_articles(
    category: str,
    service: ServiceDep,
    exclude_slug: Annotated[
        str | None, Query(alias="excludeSlug", description="Slug of the article being viewed")
    ] = None,
):
    """List up to three other articles from the same category."""
    return service.list_related(category, exclude_slug)


@router.get("/tag/{tag_name}", response_model=list[ArticleResponse])
async def list_articles_by_tag(tag_name: str, service: ServiceDep):
    """List articles by tag, falling back to category/subcategory when none are tagged."""
    return service.list_by_tag(tag_name)


@router.get(
    "/{slug}",
    response_model=ArticleResponse,
    responses={404: {"model": MessageResponse}},
)
async def get_article(slug: str, service: ServiceDep):
    """Get a single article by slug."""
    article = service.get_by_slug(slug)

    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")

    return article
