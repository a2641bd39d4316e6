"""Copy articles and subscribers from MongoDB into PostgreSQL."""

import logging
import time
from typing import Any, Callable, Iterator, Protocol

from common.errors import StoreError
from migrate_articles.models import EntityPolicy, MigrationSummary
from migrate_articles.normalize import normalize_article, normalize_subscriber
from migrate_articles.sources import SourceReader

logger = logging.getLogger(__name__)

BATCH_DELAY_SECONDS = 0.5

# Articles go in smaller batches so a failure points at fewer rows.
ARTICLES = EntityPolicy(
    name="articles",
    collection="articles",
    table="articles",
    conflict_key="slug",
    on_conflict="overwrite",
    batch_size=10,
    normalize=normalize_article,
)
SUBSCRIBERS = EntityPolicy(
    name="subscribers",
    collection="subscribers",
    table="subscribers",
    conflict_key="email",
    on_conflict="ignore",
    batch_size=20,
    normalize=normalize_subscriber,
    batch_label="subscribers batch",
)


class BulkUpserter(Protocol):
    def upsert(
        self,
        table: str,
        rows: list[dict[str, Any]],
        conflict_key: str,
        on_conflict: str,
    ) -> int:
        ...


def chunked(rows: list, size: int) -> Iterator[list]:
    for start in range(0, len(rows), size):
        yield rows[start : start + size]


def upsert_in_batches(
    rows: list[dict[str, Any]],
    policy: EntityPolicy,
    upserter: BulkUpserter,
    summary: MigrationSummary,
    delay_seconds: float = BATCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> MigrationSummary:
    """
    Upsert rows batch by batch, never aborting on a failed batch.

    A failed batch counts every row in it as an error. Batches run strictly
    in order with a fixed pause between consecutive batches.

    Args:
        rows: Normalized rows
        policy: Batch size, table and conflict policy
        upserter: Destination store
        summary: Summary to accumulate counts into
        delay_seconds: Pause between batches
        sleep: Sleep function (injectable for tests)

    Returns:
        The updated summary
    """
    batches = list(chunked(rows, policy.batch_size))
    total = len(batches)

    for number, batch in enumerate(batches, start=1):
        logger.info("Processing %s %d/%d", policy.batch_label, number, total)

        try:
            upserter.upsert(policy.table, batch, policy.conflict_key, policy.on_conflict)
        except StoreError as exc:
            logger.error("Error in %s %d: %s", policy.batch_label, number, exc.message)
            if exc.details:
                logger.error("Error details: %s", exc.details)
            summary.failed += len(batch)
        except Exception as exc:
            logger.exception("Exception in %s %d: %s", policy.batch_label, number, exc)
            summary.failed += len(batch)
        else:
            summary.succeeded += len(batch)
            logger.info("Successfully inserted/updated %d %s", len(batch), policy.name)

        if number < total:
            sleep(delay_seconds)

    return summary


def migrate_collection(
    reader: SourceReader,
    upserter: BulkUpserter,
    policy: EntityPolicy,
    delay_seconds: float = BATCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> MigrationSummary:
    """Read, normalize and upsert one source collection."""
    summary = MigrationSummary(entity=policy.name)

    documents = reader.find_all(policy.collection)
    summary.found = len(documents)
    logger.info("Found %d %s in MongoDB", len(documents), policy.name)

    if not documents:
        logger.info("No %s to migrate", policy.name)
        return summary

    rows = [policy.normalize(doc) for doc in documents]
    keyed = [row for row in rows if row.get(policy.conflict_key)]
    summary.skipped = len(rows) - len(keyed)
    if summary.skipped:
        logger.warning(
            "Skipping %d %s without %s", summary.skipped, policy.name, policy.conflict_key
        )
    logger.info("Converted %d %s to PostgreSQL format", len(keyed), policy.name)

    upsert_in_batches(keyed, policy, upserter, summary, delay_seconds, sleep)

    logger.info(
        "%s migration completed: %d %s successfully processed, %d errors",
        policy.name.capitalize(),
        summary.succeeded,
        policy.name,
        summary.failed,
    )
    return summary


def run_migration(
    reader: SourceReader,
    upserter: BulkUpserter,
    delay_seconds: float = BATCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> list[MigrationSummary]:
    """
    Run the full copy: articles first, then subscribers if the source has them.

    The reader is entered here and closed on every exit path. A failure
    outside a batch (connection, enumeration) is logged and re-raised.

    Returns:
        One summary per migrated collection
    """
    logger.info("Starting migration from MongoDB to PostgreSQL")
    summaries: list[MigrationSummary] = []

    try:
        with reader:
            names = reader.collection_names()
            logger.info("Found %d collections in MongoDB", len(names))

            if ARTICLES.collection not in names:
                logger.info("No articles collection found in MongoDB")
                return summaries

            summaries.append(migrate_collection(reader, upserter, ARTICLES, delay_seconds, sleep))

            if SUBSCRIBERS.collection in names:
                try:
                    summaries.append(
                        migrate_collection(reader, upserter, SUBSCRIBERS, delay_seconds, sleep)
                    )
                except Exception as exc:
                    logger.exception("Subscribers migration error: %s", exc)
    except Exception as exc:
        logger.exception("Migration error: %s", exc)
        raise

    return summaries
