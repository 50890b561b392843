"""Utility constants and helpers for calperiod.

Time unit constants represent durations in nanoseconds, the resolution every
period endpoint is stored at. Calendar-sized units (months, years) have no
fixed length and are deliberately absent; use the calendar constructors.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Literal, TypeAlias

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)

Instant: TypeAlias = int | datetime
Span: TypeAlias = int | timedelta


def to_nanos(value: Instant, edge: Literal["start", "end", "instant"] = "instant") -> int:
    """Convert an instant to integer nanoseconds since the Unix epoch.

    Accepts:
    - int: Passed through as-is (epoch nanoseconds)
    - datetime: Must be timezone-aware, converted exactly (no float rounding)

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
    """
    # bool is an int subclass but never a meaningful instant
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise TypeError(
                f"Period {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'Europe/Paris', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return ((value - EPOCH) // _ONE_MICROSECOND) * MICROSECOND
    raise TypeError(
        f"Period {edge} must be int (epoch nanoseconds) or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def duration_nanos(value: Span) -> int:
    """Convert a duration (int nanoseconds or timedelta) to nanoseconds."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, timedelta):
        return (value // _ONE_MICROSECOND) * MICROSECOND
    raise TypeError(
        f"Duration must be int (nanoseconds) or timedelta.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def to_datetime(nanos: int, tz: tzinfo = timezone.utc) -> datetime:
    """Convert epoch nanoseconds to an aware datetime.

    Sub-microsecond digits are truncated toward the past, since datetime
    cannot represent them.
    """
    micros = nanos // MICROSECOND
    return (EPOCH + timedelta(microseconds=micros)).astimezone(tz)


def to_timedelta(nanos: int) -> timedelta:
    """Convert a nanosecond duration to a timedelta, truncating toward the past."""
    return timedelta(microseconds=nanos // MICROSECOND)
