from .calendar import (
    add_months,
    from_day,
    from_month,
    from_quarter,
    from_semester,
    from_week,
    from_year,
    iso_weeks_in_year,
)
from .config import DEFAULT_CONFIG, PeriodConfig
from .encoding import from_dict, from_json, to_dict, to_json
from .errors import AbutsError, MustOverlapError, OutOfRangeError, PeriodError
from .period import (
    Period,
    compare,
    from_datepoints,
    from_duration,
    from_duration_before_end,
)
from .util import DAY, HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND, WEEK

__all__ = [
    "Period",
    "PeriodConfig",
    "DEFAULT_CONFIG",
    "compare",
    "from_year",
    "from_semester",
    "from_quarter",
    "from_month",
    "from_day",
    "from_week",
    "from_duration",
    "from_duration_before_end",
    "from_datepoints",
    "add_months",
    "iso_weeks_in_year",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "PeriodError",
    "OutOfRangeError",
    "MustOverlapError",
    "AbutsError",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
