"""
vanatime.core.clock
-------------------
Fixed-point conversion between Earth (Unix) microseconds and Vana'diel
microseconds since C.E. 0001-01-01 00:00:00.

Reference instants:

    A.D. 1967-02-10 00:00:00 +0900  =>  C.E. 0001-01-01 00:00:00
    A.D. 2002-01-01 00:00:00 +0900  =>  C.E. 0886-01-01 00:00:00

Vana'diel time runs exactly TIME_SCALE times faster than Earth time, so
one Vana'diel second is 0.04 Earth seconds and one Vana'diel day is
57 minutes 36 Earth seconds. All scaling is integer arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .duration import SECOND, YEAR

TIME_SCALE = 25                         # Vana'diel time goes 25 times faster than the Earth
BASE_YEAR = 886
EARTH_BASE_TIME = 1009810800 * int(SECOND)  # 2002-01-01 00:00:00 JST, Unix microseconds
MOON_CYCLE_DAYS = 84

BASE_TIME = (BASE_YEAR * int(YEAR)) // TIME_SCALE
VANA_EARTH_DIFF = BASE_TIME - EARTH_BASE_TIME

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_US = timedelta(microseconds=1)


@dataclass(frozen=True)
class FixedClock:
    """
    Scale and anchor of the Earth <-> Vana'diel mapping.

      game_us = (real_us + offset) * scale - YEAR
      real_us = floor((game_us + YEAR) / scale) - offset

    where offset = base_year * YEAR / scale - earth_base_us pins
    C.E. <base_year>-01-01 00:00:00 to the Earth instant earth_base_us.
    The shift by one YEAR makes the calendar start at year 1.
    """
    scale: int = TIME_SCALE
    base_year: int = BASE_YEAR
    earth_base_us: int = EARTH_BASE_TIME

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError("scale must be positive")
        if (self.base_year * int(YEAR)) % self.scale != 0:
            raise ValueError("base_year * YEAR must be divisible by scale")

    @property
    def offset(self) -> int:
        return (self.base_year * int(YEAR)) // self.scale - self.earth_base_us

    def to_game_time(self, real_us: int) -> int:
        return (real_us + self.offset) * self.scale - int(YEAR)

    def to_real_time(self, game_us: int) -> int:
        return (game_us + int(YEAR)) // self.scale - self.offset

    def real_seconds(self, game_us: int) -> float:
        """Length in Earth seconds of a Vana'diel span of game_us microseconds."""
        return (game_us / self.scale) / 1e6


DEFAULT_CLOCK = FixedClock()


def to_game_time(real_us: int) -> int:
    """Earth Unix microseconds -> Vana'diel microseconds (default clock)."""
    return DEFAULT_CLOCK.to_game_time(real_us)


def to_real_time(game_us: int) -> int:
    """Vana'diel microseconds -> Earth Unix microseconds (default clock)."""
    return DEFAULT_CLOCK.to_real_time(game_us)


# ============================================================
# datetime <-> Unix microseconds
# ============================================================

def datetime_to_us(dt: datetime) -> int:
    """
    Timezone-aware datetime -> Unix microseconds.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return (dt - _UNIX_EPOCH) // _ONE_US


def us_to_datetime(us: int) -> datetime:
    """
    Unix microseconds -> timezone-aware datetime in UTC.

    Raises ValueError outside 0001-01-01 .. 9999-12-31 UTC, the datetime
    range; Vana'diel instants far from the epoch have no datetime form.
    """
    try:
        return _UNIX_EPOCH + timedelta(microseconds=us)
    except OverflowError as e:
        raise ValueError(
            f"Earth time {us} us is outside the datetime range (0001-01-01 .. 9999-12-31 UTC)"
        ) from e
