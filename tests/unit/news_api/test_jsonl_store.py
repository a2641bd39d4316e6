"""Tests for news_api.io.jsonl module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from common.errors import StoreError
from news_api.config import APIConfig, LocalConfig
from news_api.io.jsonl import InMemoryArticleStore
from news_api.store import build_store
from postgres_store.articles import PostgresArticleStore

DATA = Path(__file__).resolve().parents[2] / "data" / "articles.jsonl"


class TestInMemoryArticleStore:
    def test_from_jsonl_sorted_newest_first(self) -> None:
        store = InMemoryArticleStore.from_jsonl(str(DATA))
        slugs = [a["slug"] for a in store.list_articles()]
        assert slugs == [
            "supreme-court-rules-on-bail-reform",
            "custody-after-divorce",
            "new-data-protection-rules",
        ]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(StoreError):
            InMemoryArticleStore.from_jsonl(str(tmp_path / "missing.jsonl"))

    def test_assigns_ids_when_absent(self) -> None:
        store = InMemoryArticleStore([{"slug": "a", "published_date": "2024-01-01"}])
        assert store.list_articles()[0]["id"] == 1

    def test_mixed_naive_and_aware_dates(self) -> None:
        store = InMemoryArticleStore([
            {"slug": "naive", "published_date": "2024-01-02T00:00:00"},
            {"slug": "aware", "published_date": "2024-01-01T00:00:00+00:00"},
        ])
        assert [a["slug"] for a in store.list_articles()] == ["naive", "aware"]

    def test_find_by_slug(self) -> None:
        store = InMemoryArticleStore([{"slug": "a", "published_date": "2024-01-01"}])
        assert len(store.find_by_slug("a")) == 1
        assert store.find_by_slug("b") == []


class TestBuildStore:
    def test_local_storage(self) -> None:
        config = APIConfig(storage="local", local=LocalConfig(articles_path=str(DATA)))
        store = build_store(config)
        assert isinstance(store, InMemoryArticleStore)
        assert len(store.list_articles()) == 3

    @patch("postgres_store.connection.create_engine")
    def test_postgres_storage(self, mock_create_engine) -> None:
        config = APIConfig(storage="postgres", database_url="postgresql://u@localhost/legal")
        store = build_store(config)
        assert isinstance(store, PostgresArticleStore)
        mock_create_engine.assert_called_once_with("postgresql://u@localhost/legal", pool_pre_ping=True)
