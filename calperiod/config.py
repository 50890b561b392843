"""Construction settings consulted by the calendar constructors."""

from dataclasses import dataclass, field
from typing import Literal, TypeAlias
from zoneinfo import ZoneInfo

Day: TypeAlias = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

# Mapping from day names to Python weekday integers
DAY_MAP: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


@dataclass(frozen=True, kw_only=True)
class PeriodConfig:
    """First day of the week and time zone used to lay out calendar units.

    Args:
        first_day_of_week: Day name (case-insensitive) a week starts on
        tz: IANA timezone name (e.g., "UTC", "Europe/Paris")

    Example:
        >>> config = PeriodConfig(first_day_of_week="sunday", tz="US/Pacific")
        >>> from_week(2015, 1, config=config)
    """

    first_day_of_week: Day = "monday"
    tz: str = "UTC"
    zone: ZoneInfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        day_lower = self.first_day_of_week.lower()
        if day_lower not in DAY_MAP:
            valid = ", ".join(DAY_MAP.keys())
            raise ValueError(
                f"Invalid day '{self.first_day_of_week}'. Valid days: {valid}"
            )
        object.__setattr__(self, "first_day_of_week", day_lower)
        object.__setattr__(self, "zone", ZoneInfo(self.tz))

    @property
    def first_weekday(self) -> int:
        """Python weekday integer (Monday=0) of the first day of the week."""
        return DAY_MAP[self.first_day_of_week]


DEFAULT_CONFIG = PeriodConfig()
