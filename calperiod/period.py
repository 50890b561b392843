import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Self

from calperiod.errors import AbutsError, MustOverlapError
from calperiod.util import (
    Instant,
    Span,
    duration_nanos,
    to_datetime,
    to_nanos,
    to_timedelta,
)

logger = logging.getLogger(__name__)


def compare(a: Instant, b: Instant) -> int:
    """Compare two instants at full nanosecond resolution.

    Returns -1, 0 or 1. Every predicate on Period goes through this so that
    datetimes and epoch nanoseconds are never compared at mixed resolution.
    """
    a_ns = to_nanos(a)
    b_ns = to_nanos(b)
    if a_ns > b_ns:
        return 1
    if a_ns < b_ns:
        return -1
    return 0


@dataclass(frozen=True, kw_only=True)
class Period:
    """A time range between two instants, stored as epoch nanoseconds.

    Periods are half-open (start included, end excluded) and immutable:
    every transformation returns a new Period. The initializer does not
    require start <= end; the named constructors and derived operations
    always produce ordered periods.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_nanos(self.start, "start"))
        object.__setattr__(self, "end", to_nanos(self.end, "end"))

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return (
            f"Period({to_datetime(self.start).isoformat()}→"
            f"{to_datetime(self.end).isoformat()}, {self.delta})"
        )

    def __contains__(self, instant: Instant) -> bool:
        return self.contains(instant)

    # --- accessors -------------------------------------------------------

    @property
    def duration(self) -> int:
        """Signed length in nanoseconds (end - start)."""
        return self.end - self.start

    @property
    def delta(self) -> timedelta:
        """Length as a timedelta, truncated to microseconds."""
        return to_timedelta(self.duration)

    def start_datetime(self, tz: tzinfo = timezone.utc) -> datetime:
        return to_datetime(self.start, tz)

    def end_datetime(self, tz: tzinfo = timezone.utc) -> datetime:
        return to_datetime(self.end, tz)

    # --- containment & adjacency ----------------------------------------

    def contains(self, instant: Instant) -> bool:
        """True if start <= instant < end."""
        return compare(instant, self.start) >= 0 and compare(instant, self.end) < 0

    def abuts_side(self, other: "Period") -> int | None:
        """Return which side touches `other`, or None if they do not abut.

        0 means `other` ends where this period starts; 1 means this period
        ends where `other` starts. When both hold (zero-length periods), 0
        wins.
        """
        if compare(self.start, other.end) == 0:
            return 0
        if compare(self.end, other.start) == 0:
            return 1
        return None

    def abuts(self, other: "Period") -> bool:
        return self.abuts_side(other) is not None

    def overlaps(self, other: "Period") -> bool:
        """Strict overlap: abutting periods never overlap."""
        if self.abuts(other):
            return False
        return compare(self.start, other.end) < 0 and compare(self.end, other.start) > 0

    def is_before(self, other: "Period") -> bool:
        """True if this period ends no later than `other` ends.

        Note: this compares end against end only. A period that starts long
        after `other` starts can still be "before" it.
        """
        return compare(self.end, other.end) <= 0

    def is_after(self, other: "Period") -> bool:
        """True if this period starts no earlier than `other` starts.

        Note: this compares start against start only, not against `other.end`.
        """
        return compare(self.start, other.start) >= 0

    def same_value_as(self, other: "Period") -> bool:
        return compare(self.start, other.start) == 0 and compare(self.end, other.end) == 0

    # --- endpoint setters (all return new periods) -----------------------

    def starting_on(self, start: Instant) -> Self:
        return replace(self, start=to_nanos(start, "start"))

    def ending_on(self, end: Instant) -> Self:
        return replace(self, end=to_nanos(end, "end"))

    def with_duration(self, duration: Span) -> Self:
        """Keep the start, place the end `duration` after it."""
        return replace(self, end=self.start + duration_nanos(duration))

    def add(self, duration: Span) -> Self:
        """Move the end forward by `duration`; the start is unchanged."""
        return replace(self, end=self.end + duration_nanos(duration))

    def sub(self, duration: Span) -> Self:
        """Move the end backward by `duration`; the start is unchanged."""
        return replace(self, end=self.end - duration_nanos(duration))

    def next(self) -> Self:
        """The period of equal length that starts where this one ends."""
        return replace(self, start=self.end, end=self.end + self.duration)

    def previous(self) -> Self:
        """The period of equal length that ends where this one starts."""
        return replace(self, start=self.start - self.duration, end=self.start)

    # --- derived periods -------------------------------------------------

    def merge(self, *periods: "Period") -> Self:
        """Return the envelope of this period and `periods`.

        The inputs need not overlap or abut; the result simply spans from the
        earliest start to the latest end.
        """
        start, end = self.start, self.end
        for period in periods:
            if compare(start, period.start) > 0:
                start = period.start
            if compare(end, period.end) < 0:
                end = period.end
        return replace(self, start=start, end=end)

    def intersect(self, other: "Period") -> "Period":
        """Return the range covered by both periods.

        Raises:
            AbutsError: If the periods touch without overlapping
            MustOverlapError: If the periods are disjoint
        """
        if self.abuts(other):
            logger.debug("intersect rejected abutting periods %s and %s", self, other)
            raise AbutsError(
                f"Cannot intersect abutting periods.\n"
                f"Got: {self} and {other}\n"
                f"Hint: abutting periods share an endpoint but no interior"
            )
        start = other.start if compare(other.start, self.start) > 0 else self.start
        end = other.end if compare(other.end, self.end) < 0 else self.end
        if compare(start, end) > 0:
            logger.debug("intersect rejected disjoint periods %s and %s", self, other)
            raise MustOverlapError(
                f"Cannot intersect periods that do not overlap.\n"
                f"Got: {self} and {other}\n"
                f"Hint: check overlaps() first, or use gap() for the space between"
            )
        return Period(start=start, end=end)

    def gap(self, other: "Period") -> "Period":
        """Return the period between this one and `other`.

        The later-starting period decides the direction. Callers must ensure
        the periods do not overlap; overlapping input yields an inverted
        period.
        """
        if compare(other.start, self.start) > 0:
            return Period(start=self.end, end=other.start)
        return Period(start=other.end, end=self.start)

    def diff(self, other: "Period") -> list["Period"]:
        """Return the parts covered by exactly one of two overlapping periods.

        At most two periods come back: the leading slice between the two
        starts and the trailing slice between the two ends. Zero-length
        slices are dropped.

        Raises:
            MustOverlapError: If the periods do not overlap
        """
        if not self.overlaps(other):
            logger.debug("diff rejected non-overlapping periods %s and %s", self, other)
            raise MustOverlapError(
                f"diff() requires overlapping periods.\n"
                f"Got: {self} and {other}"
            )
        result = []
        for a, b in ((self.start, other.start), (self.end, other.end)):
            slice_ = from_datepoints(a, b)
            if compare(slice_.start, slice_.end) != 0:
                result.append(slice_)
        return result

    # --- duration comparisons --------------------------------------------
    # These compare END instants rather than lengths. Two periods of equal
    # length ending at different instants do not have the "same duration".

    def compare_duration(self, other: "Period") -> int:
        return compare(self.end, other.end)

    def duration_greater_than(self, other: "Period") -> bool:
        return self.compare_duration(other) == 1

    def duration_less_than(self, other: "Period") -> bool:
        return self.compare_duration(other) == -1

    def same_duration_as(self, other: "Period") -> bool:
        return self.compare_duration(other) == 0

    def timestamp_duration_diff(self, other: "Period") -> int:
        """Difference of the two lengths in signed nanoseconds."""
        return self.duration - other.duration

    def duration_diff(self, other: "Period") -> timedelta:
        """Difference of the two lengths as a timedelta."""
        return to_timedelta(self.timestamp_duration_diff(other))

    # --- iteration -------------------------------------------------------

    def iterate(self, step: Span) -> Iterator[int]:
        """Yield instants from start (inclusive) to end (exclusive) every `step`."""
        step_ns = _positive_step(step)
        current = self.start
        while compare(current, self.end) < 0:
            yield current
            current += step_ns

    def split(self, step: Span) -> Iterator["Period"]:
        """Yield consecutive periods of length `step` covering this one.

        The last period is clipped to end where this period ends.
        """
        step_ns = _positive_step(step)
        for start in self.iterate(step_ns):
            yield Period(start=start, end=min(start + step_ns, self.end))

    # --- structured encoding ---------------------------------------------

    def to_dict(self, tz: tzinfo = timezone.utc) -> dict[str, str]:
        from calperiod.encoding import to_dict

        return to_dict(self, tz)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        from calperiod.encoding import from_dict

        decoded = from_dict(data)
        return cls(start=decoded.start, end=decoded.end)


def _positive_step(step: Span) -> int:
    step_ns = duration_nanos(step)
    if step_ns <= 0:
        raise ValueError(f"step must be positive, got {step!r}")
    return step_ns


def from_datepoints(a: Instant, b: Instant) -> Period:
    """Return the period spanning two instants given in either order."""
    if compare(a, b) > 0:
        a, b = b, a
    return Period(start=a, end=b)


def from_duration(start: Instant, duration: Span) -> Period:
    """Return the period starting at `start` and lasting `duration`.

    A negative duration is kept as given, producing an inverted period
    (end before start). Use from_datepoints to get an ordered one.
    """
    start_ns = to_nanos(start, "start")
    return Period(start=start_ns, end=start_ns + duration_nanos(duration))


def from_duration_before_end(end: Instant, duration: Span) -> Period:
    """Return the period lasting `duration` and ending at `end`."""
    end_ns = to_nanos(end, "end")
    return Period(start=end_ns - duration_nanos(duration), end=end_ns)
