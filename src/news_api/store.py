"""Article store interface and construction from config."""

from typing import Any, Protocol

from news_api.config import APIConfig
from news_api.io.jsonl import InMemoryArticleStore


class ArticleStore(Protocol):
    """Read interface the article service queries."""

    def list_articles(self) -> list[dict[str, Any]]:
        """All articles ordered by published_date, newest first."""
        ...

    def find_by_slug(self, slug: str) -> list[dict[str, Any]]:
        ...

    def ping(self) -> None:
        """Raise StoreError if the store cannot be reached."""
        ...


def build_store(config: APIConfig) -> ArticleStore:
    """Create the store selected by `config.storage`."""
    if config.is_postgres:
        from postgres_store.articles import PostgresArticleStore
        from postgres_store.connection import create_db_engine

        return PostgresArticleStore(create_db_engine(config.database_url))

    return InMemoryArticleStore.from_jsonl(config.local.articles_path)
