"""Tests for PeriodConfig."""

from zoneinfo import ZoneInfo

import pytest

from calperiod import DEFAULT_CONFIG, PeriodConfig


def test_defaults():
    assert DEFAULT_CONFIG.first_day_of_week == "monday"
    assert DEFAULT_CONFIG.tz == "UTC"
    assert DEFAULT_CONFIG.first_weekday == 0
    assert DEFAULT_CONFIG.zone == ZoneInfo("UTC")


def test_day_name_is_case_insensitive():
    config = PeriodConfig(first_day_of_week="Sunday")  # type: ignore[arg-type]
    assert config.first_day_of_week == "sunday"
    assert config.first_weekday == 6


def test_invalid_day_raises():
    with pytest.raises(ValueError, match="Invalid day 'funday'"):
        PeriodConfig(first_day_of_week="funday")  # type: ignore[arg-type]


def test_config_is_frozen_and_comparable():
    config = PeriodConfig(tz="Europe/Paris")
    assert config == PeriodConfig(tz="Europe/Paris")
    with pytest.raises(AttributeError):
        config.tz = "UTC"  # type: ignore[misc]
