"""CLI for the one-time MongoDB to PostgreSQL copy."""

from __future__ import annotations

import argparse
import logging
import sys

from common.cli_helpers import add_file_log, setup_logging
from common.errors import ConfigurationError
from migrate_articles.config import load_migration_config
from migrate_articles.migrate import BATCH_DELAY_SECONDS, run_migration
from migrate_articles.sources import MongoSourceReader
from postgres_store.connection import create_db_engine
from postgres_store.upsert import PostgresUpserter

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Copy articles and subscribers from MongoDB")
    parser.add_argument("--log-file", default=None, help="Run log (default: migration-log.txt)")
    parser.add_argument("--delay", type=float, default=BATCH_DELAY_SECONDS)
    args = parser.parse_args()

    setup_logging()

    try:
        config = load_migration_config()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    log_file = args.log_file or config.log_file
    handler = add_file_log(log_file, "migrate_articles")

    reader = MongoSourceReader(config.mongodb_uri, config.mongodb_database)
    upserter = PostgresUpserter(create_db_engine(config.database_url))

    try:
        summaries = run_migration(reader, upserter, delay_seconds=args.delay)
    except Exception:
        logger.error("Fatal error, see %s for details", log_file)
        sys.exit(1)
    finally:
        logging.getLogger("migrate_articles").removeHandler(handler)
        handler.close()

    for summary in summaries:
        logger.info(
            "%s: %d succeeded, %d failed, %d skipped",
            summary.entity,
            summary.succeeded,
            summary.failed,
            summary.skipped,
        )
    logger.info("Migration process completed. Check %s for details.", log_file)


if __name__ == "__main__":
    main()
