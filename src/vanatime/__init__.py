"""vanatime public API.

Vana'diel (Final Fantasy XI) time: a fixed 25x Earth-time calendar with
360-day years, 30-day months and 8-day weeks. Keep this surface small: users
should mostly interact with names re-exported here.
"""

# Register standard attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    now,
    date,
    from_earth,
    from_int,
    info,
    list_attributes,
)
from .attributes.moon import Moon, MoonPhase
from .attributes.weekday import Weekday
from .core.clock import DEFAULT_CLOCK, FixedClock, to_game_time, to_real_time
from .core.duration import (
    DAY,
    HOUR,
    MAX_DURATION,
    MICROSECOND,
    MILLISECOND,
    MIN_DURATION,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    Duration,
    parse_duration,
)
from .core.errors import DurationParseError, FormatDirectiveError, NanosecondUnitError, VanatimeError
from .core.instant import Instant, since, until
from .strftime import strftime, unknown_directives

__all__ = [
    "now",
    "date",
    "from_earth",
    "from_int",
    "info",
    "list_attributes",
    "Instant",
    "Duration",
    "Weekday",
    "Moon",
    "MoonPhase",
    "FixedClock",
    "DEFAULT_CLOCK",
    "to_game_time",
    "to_real_time",
    "parse_duration",
    "since",
    "until",
    "strftime",
    "unknown_directives",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "MIN_DURATION",
    "MAX_DURATION",
    "VanatimeError",
    "DurationParseError",
    "NanosecondUnitError",
    "FormatDirectiveError",
]
