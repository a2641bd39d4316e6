"""JSONL-backed article store for local development."""

import gzip
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Iterator

from common.datetime import parse_datetime
from common.errors import StoreError


def read_jsonl(path: str) -> Iterator[dict]:
    """Read a JSONL file and yield records.

    Supports both plain and gzip-compressed JSONL files.
    """
    opener = gzip.open if path.endswith(".gz") else open
    with opener(path, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)


def _published_key(article: dict) -> datetime:
    return parse_datetime(article.get("published_date"))


class InMemoryArticleStore:
    """Article store holding rows in memory, newest first."""

    def __init__(self, articles: Iterable[dict[str, Any]] = ()):
        rows = []
        for index, article in enumerate(articles, start=1):
            row = dict(article)
            row.setdefault("id", index)
            rows.append(row)
        self._articles = sorted(rows, key=_published_key, reverse=True)

    @classmethod
    def from_jsonl(cls, path: str) -> "InMemoryArticleStore":
        if not Path(path).exists():
            raise StoreError(f"Articles file not found: {path}")
        return cls(read_jsonl(path))

    def list_articles(self) -> list[dict[str, Any]]:
        return list(self._articles)

    def find_by_slug(self, slug: str) -> list[dict[str, Any]]:
        return [a for a in self._articles if a.get("slug") == slug]

    def ping(self) -> None:
        return None
