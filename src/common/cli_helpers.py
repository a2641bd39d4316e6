"""Common CLI helper utilities."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def add_file_log(
    path: str | Path,
    logger_name: str | None = None,
    level: int = logging.INFO,
) -> logging.FileHandler:
    """Append log records to a file as timestamped lines.

    The file is opened in append mode so repeated runs accumulate in one log.

    Args:
        path: Log file location; parent directories are created.
        logger_name: Logger to attach to (root logger when None).
        level: Minimum level written to the file.

    Returns:
        The attached handler, so callers can detach and close it.
    """
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s: %(message)s"))

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
