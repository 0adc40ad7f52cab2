# bikeflow/traffic/time_filter.py
from __future__ import annotations

from datetime import datetime, timedelta

MINUTES_PER_DAY = 1440
WINDOW_MINUTES = 60

# slider value meaning "any time"
NO_FILTER = -1


def minutes_since_midnight(dt: datetime) -> int:
    # seconds are dropped on purpose, trips in the same minute share a bucket
    return dt.hour * 60 + dt.minute


def window_bounds(time_filter: int) -> tuple[int, int]:
    """
    Slot bounds [lo, hi) of the ±60 minute window around `time_filter`.
    lo > hi means the window wraps past midnight.
    """
    lo = (time_filter - WINDOW_MINUTES + MINUTES_PER_DAY) % MINUTES_PER_DAY
    hi = (time_filter + WINDOW_MINUTES) % MINUTES_PER_DAY
    return lo, hi


def is_filtered(time_filter: int) -> bool:
    return time_filter != NO_FILTER


def validate_time_filter(time_filter: int) -> int:
    time_filter = int(time_filter)
    if time_filter != NO_FILTER and not (0 <= time_filter < MINUTES_PER_DAY):
        raise ValueError(
            f"time filter must be {NO_FILTER} or within 0..{MINUTES_PER_DAY - 1}, "
            f"got {time_filter}"
        )
    return time_filter


def coerce_time_filter(raw) -> int:
    """
    Lenient version for values coming from the slider / query string.
    Garbage means no filter, numbers are clamped into range.
    """
    if raw is None:
        return NO_FILTER
    try:
        t = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return NO_FILTER
    if t < 0:
        return NO_FILTER
    return min(t, MINUTES_PER_DAY - 1)


def format_time(minutes: int) -> str:
    """
    12-hour label for a minute of day, e.g. 0 -> "12:00 AM", 785 -> "1:05 PM".
    """
    t = datetime(1900, 1, 1) + timedelta(minutes=int(minutes))
    return t.strftime("%I:%M %p").lstrip("0")
