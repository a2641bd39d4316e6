"""Read access to the articles table."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from postgres_store.connection import get_session, to_store_error
from postgres_store.models import Article

logger = logging.getLogger(__name__)


class PostgresArticleStore:
    """Article store backed by the `articles` table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_articles(self) -> list[dict[str, Any]]:
        """All articles, newest first."""
        stmt = select(Article).order_by(Article.published_date.desc())
        return self._fetch(stmt)

    def find_by_slug(self, slug: str) -> list[dict[str, Any]]:
        """Articles whose slug equals `slug`."""
        stmt = select(Article).where(Article.slug == slug)
        return self._fetch(stmt)

    def ping(self) -> None:
        """Trivial round-trip to check the database is reachable."""
        try:
            with get_session(self.engine) as session:
                session.execute(select(Article.id).limit(1)).all()
        except SQLAlchemyError as exc:
            raise to_store_error(exc) from exc

    def _fetch(self, stmt) -> list[dict[str, Any]]:
        try:
            with get_session(self.engine) as session:
                return [article.to_dict() for article in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            logger.error("Article query failed: %s", exc)
            raise to_store_error(exc) from exc
