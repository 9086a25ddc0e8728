"""Datetime helpers for favorite timestamps and record bookkeeping.

Usage:
    from recipe_day.utils.datetime_utils import utc_now, format_timestamp

    favorite.added_date = utc_now()
    label = format_timestamp(favorite.added_date)
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> str:
    """
    Render a timestamp for display as "YYYY-MM-DD HH:MM:SS".

    Args:
        value: Datetime to format (naive or aware)

    Returns:
        Formatted string, or "" when value is None
    """
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S")
