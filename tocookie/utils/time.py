"""UTC time helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def epoch_seconds() -> int:
    """Return whole seconds since the Unix epoch."""
    return int(utc_now().timestamp())


def to_epoch_seconds(value: datetime | int) -> int:
    """Normalize a datetime or epoch integer to whole epoch seconds.

    Naive datetimes are interpreted as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return math.floor(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected datetime or int, got {type(value).__name__}")
    return value


def format_epoch(seconds: int) -> str:
    """Render epoch seconds as an RFC 3339 UTC timestamp."""
    try:
        return datetime.fromtimestamp(seconds, timezone.utc).isoformat()
    except (OverflowError, OSError, ValueError):
        return str(seconds)
