"""Create the articles and subscribers tables if they don't exist."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

from postgres_store.connection import create_db_engine
from postgres_store.models import Base

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_tables() -> None:
    database_url = os.environ.get("ADMIN_DATABASE_URL") or os.environ["DATABASE_URL"]
    engine = create_db_engine(database_url)
    Base.metadata.create_all(engine)
    logger.info("Ensured tables: %s", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    create_tables()


if __name__ == "__main__":
    main()
