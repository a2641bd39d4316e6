"""MongoDB source for the migration job."""

import logging
from typing import Any, Protocol

import pymongo
from pymongo.errors import PyMongoError

from common.errors import StoreError

logger = logging.getLogger(__name__)


class SourceReader(Protocol):
    """Bulk reader over a document store."""

    def __enter__(self) -> "SourceReader":
        ...

    def __exit__(self, *exc_info) -> None:
        ...

    def collection_names(self) -> list[str]:
        ...

    def find_all(self, collection: str) -> list[dict[str, Any]]:
        ...


class MongoSourceReader:
    """Reads whole collections from one MongoDB database.

    Use as a context manager: the client connects on enter and is closed on
    exit, whether the run succeeded or not.
    """

    def __init__(self, mongodb_uri: str, database_name: str | None = None):
        self.mongodb_uri = mongodb_uri
        self.database_name = database_name
        self.client: pymongo.MongoClient | None = None
        self.db = None

    def __enter__(self) -> "MongoSourceReader":
        logger.info("Connecting to MongoDB...")
        try:
            self.client = pymongo.MongoClient(self.mongodb_uri, serverSelectionTimeoutMS=5000)
            self.client.admin.command("ping")
            if self.database_name:
                self.db = self.client[self.database_name]
            else:
                # default database from the connection string
                self.db = self.client.get_default_database()
        except (PyMongoError, ValueError) as exc:
            self.close()
            raise StoreError(f"Could not connect to MongoDB: {exc}") from exc
        logger.info("Connected to MongoDB")
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")

    def collection_names(self) -> list[str]:
        try:
            return self.db.list_collection_names()
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    def find_all(self, collection: str) -> list[dict[str, Any]]:
        try:
            return list(self.db[collection].find({}))
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
