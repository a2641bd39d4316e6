"""Tests for migrate_articles.cli module."""

import logging
from unittest.mock import patch

import pytest

from common.errors import StoreError
from migrate_articles.cli import main
from migrate_articles.models import MigrationSummary


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost/legal")
    monkeypatch.setenv("ADMIN_DATABASE_URL", "postgresql://admin@localhost/legal")
    log_file = tmp_path / "migration-log.txt"
    monkeypatch.setattr("sys.argv", ["migrate-articles", "--log-file", str(log_file), "--delay", "0"])
    yield log_file
    logging.getLogger("migrate_articles").handlers.clear()


class TestMain:
    @patch("migrate_articles.cli.run_migration")
    @patch("migrate_articles.cli.PostgresUpserter")
    @patch("migrate_articles.cli.create_db_engine")
    @patch("migrate_articles.cli.MongoSourceReader")
    def test_happy_path(self, mock_reader, mock_engine, mock_upserter, mock_run, env) -> None:
        mock_run.return_value = [MigrationSummary("articles", found=2, succeeded=2)]

        main()

        mock_reader.assert_called_once_with("mongodb://localhost/legal", None)
        mock_engine.assert_called_once_with("postgresql://admin@localhost/legal")
        mock_run.assert_called_once_with(
            mock_reader.return_value, mock_upserter.return_value, delay_seconds=0.0
        )
        assert logging.getLogger("migrate_articles").handlers == []

    @patch("migrate_articles.cli.run_migration")
    @patch("migrate_articles.cli.PostgresUpserter")
    @patch("migrate_articles.cli.create_db_engine")
    @patch("migrate_articles.cli.MongoSourceReader")
    def test_run_log_written(self, mock_reader, mock_engine, mock_upserter, mock_run, env) -> None:
        def fake_run(*args, **kwargs):
            logging.getLogger("migrate_articles.migrate").info("Processing batch 1/1")
            return []

        mock_run.side_effect = fake_run

        main()

        assert "Processing batch 1/1" in env.read_text()

    @patch("migrate_articles.cli.run_migration")
    @patch("migrate_articles.cli.PostgresUpserter")
    @patch("migrate_articles.cli.create_db_engine")
    @patch("migrate_articles.cli.MongoSourceReader")
    def test_fatal_error_exits_non_zero(self, mock_reader, mock_engine, mock_upserter, mock_run, env) -> None:
        mock_run.side_effect = StoreError("Could not connect to MongoDB")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_missing_config_exits_non_zero(self, monkeypatch) -> None:
        monkeypatch.delenv("MONGODB_URI", raising=False)
        monkeypatch.setattr("sys.argv", ["migrate-articles"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
