"""Tests for the structured (dict / JSON) encoding of periods."""

import json
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from calperiod import (
    MILLISECOND,
    SECOND,
    Period,
    from_dict,
    from_json,
    from_year,
    to_dict,
    to_json,
)
from calperiod.encoding import format_instant, parse_instant
from calperiod.util import to_nanos


def test_to_dict_has_start_and_end():
    assert to_dict(from_year(2024)) == {
        "start": "2024-01-01T00:00:00.000000000+00:00",
        "end": "2025-01-01T00:00:00.000000000+00:00",
    }


def test_json_round_trip_keeps_nanoseconds():
    base = to_nanos(datetime(2024, 5, 17, 8, 30, tzinfo=timezone.utc))
    period = Period(start=base + 123, end=base + 456_789_001)

    encoded = to_json(period)

    assert json.loads(encoded)["start"] == "2024-05-17T08:30:00.000000123+00:00"
    assert from_json(encoded) == period


def test_round_trip_before_epoch():
    period = Period(start=-1, end=0)

    assert to_dict(period)["start"] == "1969-12-31T23:59:59.999999999+00:00"
    assert from_dict(to_dict(period)) == period


def test_encoding_in_another_zone_decodes_to_same_instants():
    period = from_year(2024)
    encoded = to_dict(period, ZoneInfo("Europe/Paris"))

    assert encoded["start"] == "2024-01-01T01:00:00.000000000+01:00"
    assert from_dict(encoded) == period


def test_decodes_short_fractions_and_zulu():
    period = from_dict(
        {"start": "2024-01-01T00:00:00Z", "end": "2024-01-01T00:00:00.5Z"}
    )
    assert period.duration == 500 * MILLISECOND


def test_decodes_epoch_nanoseconds():
    assert from_dict({"start": 0, "end": 10}) == Period(start=0, end=10)


def test_period_methods_delegate():
    period = from_year(2024)
    assert Period.from_dict(period.to_dict()) == period


def test_missing_field_raises():
    with pytest.raises(KeyError, match="end"):
        from_dict({"start": "2024-01-01T00:00:00Z"})


def test_naive_timestamp_raises():
    with pytest.raises(ValueError, match="UTC offset"):
        parse_instant("2024-01-01T00:00:00")


def test_bad_type_raises():
    with pytest.raises(TypeError, match="ISO-8601 string or int"):
        parse_instant(1.5)  # type: ignore[arg-type]


def test_format_instant_pads_fraction():
    assert format_instant(1) == "1970-01-01T00:00:00.000000001+00:00"


@pytest.mark.parametrize(
    "period",
    [
        from_year(1),
        from_year(999),
        from_year(9998),
        Period(start=-1, end=0),
        Period(start=-62_135_596_800 * SECOND + 7, end=-5),
    ],
    ids=["year-1", "year-999", "year-9998", "before-epoch", "first-instant"],
)
@pytest.mark.parametrize(
    "tz",
    [
        timezone.utc,
        ZoneInfo("Europe/Amsterdam"),
        timezone(timedelta(hours=1, seconds=30)),
    ],
    ids=["utc", "amsterdam", "seconds-offset"],
)
def test_round_trip_at_range_edges(period, tz):
    assert from_dict(to_dict(period, tz)) == period


def test_years_before_1000_are_zero_padded():
    encoded = to_dict(from_year(999))

    assert encoded["start"] == "0999-01-01T00:00:00.000000000+00:00"
    assert encoded["end"] == "1000-01-01T00:00:00.000000000+00:00"


def test_local_mean_time_offset_keeps_seconds():
    # Amsterdam kept local mean time (+00:19:32) until 1937
    period = from_year(1900)
    encoded = to_dict(period, ZoneInfo("Europe/Amsterdam"))

    assert encoded["start"] == "1900-01-01T00:19:32.000000000+00:19:32"
    assert from_dict(encoded) == period


def test_parses_negative_seconds_offset():
    assert parse_instant("1970-01-01T00:00:00-00:00:30") == 30 * SECOND
    assert parse_instant("1970-01-01T00:00:00.25+0000") == 250 * MILLISECOND


def test_from_dict_builds_the_calling_class():
    class Shift(Period):
        pass

    decoded = Shift.from_dict(to_dict(from_year(2024)))

    assert type(decoded) is Shift
    assert decoded.same_value_as(from_year(2024))
