"""Print counts of articles and subscribers in the database."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from sqlalchemy import func, select

load_dotenv()

from postgres_store.connection import create_db_engine, get_session
from postgres_store.models import Article, Subscriber


def get_counts() -> tuple[int, int]:
    """Return (article_count, subscriber_count)."""
    engine = create_db_engine(os.environ["DATABASE_URL"])
    with get_session(engine) as session:
        article_count = session.execute(select(func.count()).select_from(Article)).scalar_one()
        subscriber_count = session.execute(select(func.count()).select_from(Subscriber)).scalar_one()
    return article_count, subscriber_count


def main() -> None:
    article_count, subscriber_count = get_counts()
    print(f"Articles: {article_count}")
    print(f"Subscribers: {subscriber_count}")


if __name__ == "__main__":
    main()
