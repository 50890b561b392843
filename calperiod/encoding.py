"""Structured encoding of periods.

A period encodes as a record with two fields, ``start`` and ``end``, each an
ISO-8601 timestamp carrying nine fractional-second digits and a UTC offset::

    {"start": "2024-01-01T00:00:00.000000000+00:00",
     "end": "2025-01-01T00:00:00.000000000+00:00"}

Decoding accepts any ISO-8601 timestamp with a UTC offset and zero to nine
fractional digits, or an integer of epoch nanoseconds, and reproduces the
encoded instants exactly.
"""

import json
import re
from datetime import timedelta, timezone, tzinfo
from typing import Any

from dateutil.parser import isoparse

from calperiod.period import Period
from calperiod.util import SECOND, to_datetime, to_nanos

# Split a timestamp into date-and-time, fractional digits and UTC offset
_TIMESTAMP = re.compile(
    r"^(?P<head>[^T ]+[T ][\d:]+)"
    r"(?:[.,](?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}(?::?\d{2}){0,2})?$"
)


def format_instant(nanos: int, tz: tzinfo = timezone.utc) -> str:
    """Render epoch nanoseconds as ISO-8601 with nanosecond precision.

    The offset keeps its seconds when the zone has them (local mean time),
    e.g. ``+00:19:32``.
    """
    whole, fraction = divmod(nanos, SECOND)
    text = to_datetime(whole * SECOND, tz).isoformat()
    # isoformat pads the year to four digits: YYYY-MM-DDTHH:MM:SS is 19 chars
    return f"{text[:19]}.{fraction:09d}{text[19:]}"


def _parse_offset(offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc
    digits = offset[1:].replace(":", "")
    delta = timedelta(
        hours=int(digits[0:2]),
        minutes=int(digits[2:4] or 0),
        seconds=int(digits[4:6] or 0),
    )
    return timezone(-delta if offset[0] == "-" else delta)


def parse_instant(value: str | int) -> int:
    """Parse an ISO-8601 timestamp (or epoch nanoseconds) to epoch nanoseconds.

    Raises:
        TypeError: If the value is neither str nor int
        ValueError: If the string is not ISO-8601 or lacks a UTC offset
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise TypeError(
            f"Encoded instant must be an ISO-8601 string or int nanoseconds.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    match = _TIMESTAMP.match(value.strip())
    if match is None:
        raise ValueError(f"Not an ISO-8601 timestamp: {value!r}")
    if match["offset"] is None:
        raise ValueError(
            f"Encoded instant must carry a UTC offset, got {value!r}\n"
            f"Hint: append 'Z' or '+00:00'"
        )
    parsed = isoparse(match["head"]).replace(tzinfo=_parse_offset(match["offset"]))
    fraction = (match["fraction"] or "").ljust(9, "0")
    return to_nanos(parsed) + int(fraction)


def to_dict(period: Period, tz: tzinfo = timezone.utc) -> dict[str, str]:
    return {
        "start": format_instant(period.start, tz),
        "end": format_instant(period.end, tz),
    }


def from_dict(data: dict[str, Any]) -> Period:
    """Decode a record produced by to_dict.

    Raises:
        KeyError: If ``start`` or ``end`` is missing
    """
    missing = [key for key in ("start", "end") if key not in data]
    if missing:
        raise KeyError(
            f"Encoded period is missing field(s) {', '.join(missing)}.\n"
            f"Got keys: {sorted(data)}"
        )
    return Period(start=parse_instant(data["start"]), end=parse_instant(data["end"]))


def to_json(period: Period, tz: tzinfo = timezone.utc) -> str:
    return json.dumps(to_dict(period, tz))


def from_json(text: str) -> Period:
    return from_dict(json.loads(text))
