"""Named constructors mapping calendar units to half-open periods.

Every constructor lays its unit out in the time zone of the given
PeriodConfig (UTC by default) and starts it at local midnight. Unit lengths
come from python-dateutil's relativedelta, so months and years follow the
calendar and days follow the wall clock (a day across a DST change lasts 23
or 25 hours).
"""

import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from calperiod.config import DEFAULT_CONFIG, PeriodConfig
from calperiod.errors import OutOfRangeError
from calperiod.period import Period
from calperiod.util import to_nanos

logger = logging.getLogger(__name__)


def _validate_range(unit: str, value: int, minimum: int, maximum: int) -> int:
    if value < minimum or value > maximum:
        logger.debug("%s %d outside [%d, %d]", unit, value, minimum, maximum)
        raise OutOfRangeError(unit, value, minimum, maximum)
    return value


def _span(start: datetime, step: relativedelta) -> Period:
    end = start + step
    logger.debug("calendar period %s -> %s", start.isoformat(), end.isoformat())
    return Period(start=to_nanos(start, "start"), end=to_nanos(end, "end"))


def _month_start(year: int, month: int, config: PeriodConfig) -> datetime:
    _validate_range("year", year, MINYEAR, MAXYEAR - 1)
    return datetime(year, month, 1, tzinfo=config.zone)


def add_months(value: datetime, months: int) -> datetime:
    """Add calendar months, clamping to the last day of a shorter month.

    Example:
        >>> add_months(datetime(2024, 1, 31, tzinfo=timezone.utc), 1)
        datetime.datetime(2024, 2, 29, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return value + relativedelta(months=months)


def from_year(year: int, *, config: PeriodConfig = DEFAULT_CONFIG) -> Period:
    """Return January 1 of `year` up to January 1 of the next year."""
    return _span(_month_start(year, 1, config), relativedelta(years=1))


def from_semester(
    year: int, semester: int, *, config: PeriodConfig = DEFAULT_CONFIG
) -> Period:
    """Return the six months of half-year `semester` (1 or 2)."""
    _validate_range("semester", semester, 1, 2)
    month = (semester - 1) * 6 + 1
    return _span(_month_start(year, month, config), relativedelta(months=6))


def from_quarter(
    year: int, quarter: int, *, config: PeriodConfig = DEFAULT_CONFIG
) -> Period:
    """Return the three months of `quarter` (1 to 4)."""
    _validate_range("quarter", quarter, 1, 4)
    month = (quarter - 1) * 3 + 1
    return _span(_month_start(year, month, config), relativedelta(months=3))


def from_month(
    year: int, month: int, *, config: PeriodConfig = DEFAULT_CONFIG
) -> Period:
    """Return the calendar month `month` (1 to 12) of `year`."""
    _validate_range("month", month, 1, 12)
    return _span(_month_start(year, month, config), relativedelta(months=1))


def from_day(
    year: int, month: int, day: int, *, config: PeriodConfig = DEFAULT_CONFIG
) -> Period:
    """Return one calendar day.

    Only the coarse bounds 1-12 and 1-31 are checked. A day past the end of
    its month rolls over into the next one, so (2023, 4, 31) is May 1.
    """
    _validate_range("month", month, 1, 12)
    _validate_range("day", day, 1, 31)
    start = _month_start(year, month, config) + timedelta(days=day - 1)
    return _span(start, relativedelta(days=1))


def iso_weeks_in_year(year: int) -> int:
    """Number of ISO-8601 weeks (52 or 53) in ISO year `year`."""
    # December 28 always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar().week


def from_week(year: int, week: int, *, config: PeriodConfig = DEFAULT_CONFIG) -> Period:
    """Return the seven days of ISO week `week` of ISO year `year`.

    The ISO week (Monday start, week 1 holding the year's first Thursday)
    selects the week. Its start is then re-anchored to the configured first
    day of the week: a Sunday start moves to the Sunday just before the ISO
    Monday, any other day moves forward from that Monday.

    Raises:
        OutOfRangeError: If `week` is outside 1-53, or is 53 in a year that
            has only 52 ISO weeks
    """
    _validate_range("week", week, 1, 53)
    _validate_range("year", year, MINYEAR + 1, MAXYEAR - 1)
    _validate_range("week", week, 1, iso_weeks_in_year(year))

    monday = date.fromisocalendar(year, week, 1)
    offset = config.first_weekday
    if config.first_day_of_week == "sunday":
        offset = -1
    first_day = monday + timedelta(days=offset)
    logger.debug(
        "ISO week %d-W%02d starts %s, anchored to %s as %s",
        year,
        week,
        monday,
        config.first_day_of_week,
        first_day,
    )
    start = datetime(first_day.year, first_day.month, first_day.day, tzinfo=config.zone)
    return _span(start, relativedelta(days=7))
