"""Configuration for the migration job, read from the environment."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from common.config import require_env
from common.errors import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class MigrationConfig:
    mongodb_uri: str
    database_url: str
    mongodb_database: str | None = None
    log_file: str = "migration-log.txt"


def load_migration_config() -> MigrationConfig:
    """Build the config from env vars.

    ADMIN_DATABASE_URL should carry a role that bypasses row level security;
    without it the job falls back to DATABASE_URL and warns.

    Raises:
        ConfigurationError: If MONGODB_URI or both database URLs are missing
    """
    mongodb_uri = require_env("MONGODB_URI")

    database_url = os.environ.get("ADMIN_DATABASE_URL")
    if not database_url:
        database_url = os.environ.get("DATABASE_URL")
        if not database_url:
            raise ConfigurationError(
                "Missing ADMIN_DATABASE_URL environment variable. Please add it to your .env file"
            )
        logger.warning(
            "ADMIN_DATABASE_URL not set, using DATABASE_URL. "
            "Migration will likely fail due to row level security restrictions."
        )

    return MigrationConfig(
        mongodb_uri=mongodb_uri,
        database_url=database_url,
        mongodb_database=os.environ.get("MONGODB_DATABASE") or None,
        log_file=os.environ.get("MIGRATION_LOG_FILE", "migration-log.txt"),
    )
