"""Time utilities for consistent timestamp handling."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return current UTC timestamp (timezone-aware)."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """Build a clock that always returns *instant* (normalised to UTC)."""
    pinned = ensure_utc(instant)
    return lambda: pinned
