"""Data models for the migration job."""

from dataclasses import dataclass
from typing import Any, Callable, Literal


@dataclass(frozen=True)
class EntityPolicy:
    """How one source collection is copied into one destination table."""
    name: str
    collection: str
    table: str
    conflict_key: str
    on_conflict: Literal["overwrite", "ignore"]
    batch_size: int
    normalize: Callable[[dict[str, Any]], dict[str, Any]]
    batch_label: str = "batch"


@dataclass
class MigrationSummary:
    """Outcome of copying one collection."""
    entity: str
    found: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
