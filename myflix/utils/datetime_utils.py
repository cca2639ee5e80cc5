"""
Centralized DateTime Utilities
==============================

Consistent datetime handling across the application. All timestamps are
timezone-aware UTC.

Functions:
- now(): Current UTC datetime
- date_to_datetime(): Calendar date to midnight UTC (BSON has no date type)
- datetime_to_date(): Stored datetime back to a calendar date
"""
from datetime import date, datetime, time, timezone
from typing import Optional


def now() -> datetime:
    """
    Get current datetime in UTC.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(timezone.utc)


def date_to_datetime(value: Optional[date]) -> Optional[datetime]:
    """
    Convert a calendar date to a midnight UTC datetime for storage.

    Args:
        value: date (or datetime, returned unchanged) or None

    Returns:
        datetime at 00:00 UTC, or None if value is None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def datetime_to_date(value) -> Optional[date]:
    """
    Convert a stored birthday back to a calendar date.

    Accepts datetime, date or ISO 8601 strings (older documents).
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None
