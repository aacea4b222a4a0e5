"""Utility functions for working with dates and times."""

from datetime import datetime, timezone

__all__ = [
    "get_current_timestamp",
]

def get_current_timestamp() -> datetime:
    """Return the current UTC datetime with milli-second precision.

    MongoDB stores BSON Dates with millisecond resolution, so the value is
    truncated here to make a stored-then-loaded event compare equal to the
    original object.
    """
    now = datetime.now(tz=timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
