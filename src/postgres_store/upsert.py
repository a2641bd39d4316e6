"""Bulk upserts into the articles database."""

import logging
from typing import Any, Literal

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from postgres_store.connection import get_session, to_store_error
from postgres_store.models import TABLES

logger = logging.getLogger(__name__)

ConflictPolicy = Literal["overwrite", "ignore"]


class PostgresUpserter:
    """Upserts whole batches of rows in one statement.

    Each call is one transaction: either every row in the batch is written
    or none is, and the failure surfaces as a StoreError.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def upsert(
        self,
        table: str,
        rows: list[dict[str, Any]],
        conflict_key: str,
        on_conflict: ConflictPolicy,
    ) -> int:
        """
        Insert rows, resolving conflicts on `conflict_key`.

        Args:
            table: Destination table name ("articles" or "subscribers")
            rows: Normalized rows, all with the same keys
            conflict_key: Unique column the conflict is detected on
            on_conflict: "overwrite" updates the existing row, "ignore" keeps it

        Returns:
            Number of rows sent
        """
        if not rows:
            return 0

        model = TABLES[table]
        stmt = insert(model).values(rows)
        if on_conflict == "overwrite":
            update_columns = {
                key: stmt.excluded[key] for key in rows[0] if key != conflict_key
            }
            stmt = stmt.on_conflict_do_update(index_elements=[conflict_key], set_=update_columns)
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=[conflict_key])

        try:
            with get_session(self.engine) as session:
                session.execute(stmt)
        except SQLAlchemyError as exc:
            raise to_store_error(exc) from exc

        logger.debug("Upserted %d rows into %s", len(rows), table)
        return len(rows)
