"""Timezone utilities for neo-domain.

All kernel timestamps are UTC-aware datetimes.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone awareness.

    Returns:
        Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime has UTC timezone.

    Naive datetimes are assumed to be UTC; aware datetimes are converted.

    Args:
        dt: Datetime to process

    Returns:
        UTC datetime with timezone info
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt
