from __future__ import annotations
from datetime import datetime, timedelta, timezone

# Lightweight time utilities (no external deps).
# We use UTC internally; the location's offset comes from the weather provider.


def to_utc(dt: datetime) -> datetime:
    """Normalise a datetime to aware UTC (naive values are assumed UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def location_time(now_utc: datetime, utc_offset_seconds: int) -> datetime:
    """Wall-clock time at a location, as a naive datetime."""
    return to_utc(now_utc).replace(tzinfo=None) + timedelta(seconds=utc_offset_seconds)


def local_hour(now_utc: datetime, utc_offset_seconds: int) -> float:
    """
    Decimal local hour in [0, 24) at a location.

    Seconds are dropped, so 13:45:59 → 13.75.
    """
    local = location_time(now_utc, utc_offset_seconds)
    return local.hour + local.minute / 60.0


def format_clock(hour: float) -> str:
    """13.75 → '13:45'."""
    h = int(hour) % 24
    m = int(round((hour - int(hour)) * 60.0))
    if m == 60:
        h, m = (h + 1) % 24, 0
    return f"{h:02d}:{m:02d}"
