"""
Centralized DateTime Utilities
==============================

All persisted timestamps are timezone-aware UTC.

Functions:
- utc_now(): current UTC time, truncated to BSON Date precision
- ensure_utc(): normalize naive/aware datetimes into aware UTC
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Microseconds are truncated to milliseconds, the precision MongoDB keeps
    for BSON Dates, so a stored timestamp reads back equal to the one written.
    """
    current = datetime.now(dt_timezone.utc)
    return current.replace(microsecond=(current.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)
