"""Datetime utilities."""

from datetime import datetime, timezone

from dateutil.parser import parse as parse_date


def parse_datetime(value) -> datetime:
    """Parse a datetime from a source record.

    Datetimes pass through and strings are parsed. Anything else, including
    unparseable strings, falls back to the current UTC time. Naive values are
    taken to be UTC, which is how MongoDB stores them.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, str) and value.strip():
        try:
            return _as_utc(parse_date(value))
        except (ValueError, OverflowError):
            return datetime.now(timezone.utc)
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
