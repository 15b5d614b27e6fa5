"""
vanatime.core.instant
---------------------
A Vana'diel instant, stored as microseconds since C.E. 0001-01-01 00:00:00.

Vana'diel calendar:

    One year   = 12 months = 360 days
    One month  = 30 days
    One week   = 8 days
    One day    = 24 hours
    One hour   = 60 minutes
    One minute = 60 seconds
    One second = 0.04 Earth seconds

Every 64-bit count decomposes to exactly one (year, month, day, hour,
minute, second, microsecond) tuple; decomposition uses floor division, so
instants before the epoch land in year 0 and below.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..attributes.moon import Moon
from ..attributes.weekday import Weekday, weekday_of
from ..strftime import strftime as _strftime
from .clock import DEFAULT_CLOCK, FixedClock, datetime_to_us, us_to_datetime
from .duration import (
    DAY,
    HOUR,
    MAX_DURATION,
    MIN_DURATION,
    MINUTE,
    MONTH,
    SECOND,
    YEAR,
    Duration,
    wrap_int64,
)


def _norm(hi: int, lo: int, base: int) -> Tuple[int, int]:
    """Carry lo into hi so that 0 <= lo < base (negative lo borrows from hi)."""
    q, lo = divmod(lo, base)
    return hi + q, lo


@dataclass(frozen=True, order=True)
class Instant:
    raw: int = 0  # microseconds since C.E. 0001-01-01 00:00:00

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", wrap_int64(int(self.raw)))

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def now(cls, *, clock: Optional[FixedClock] = None) -> "Instant":
        return cls.from_earth(datetime.now(timezone.utc), clock=clock)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> "Instant":
        """
        Build an instant from calendar fields. Fields may be out of range or
        negative; overflow carries upward (microsecond -> ... -> year), e.g.
        month 14 of year Y is month 2 of year Y+1.
        """
        # month and day are 1-based; carry on their 0-based offsets
        mon0, day0 = month - 1, day - 1
        second, microsecond = _norm(second, microsecond, 1000000)
        minute, second = _norm(minute, second, 60)
        hour, minute = _norm(hour, minute, 60)
        day0, hour = _norm(day0, hour, 24)
        mon0, day0 = _norm(mon0, day0, 30)
        year, mon0 = _norm(year, mon0, 12)

        return cls(
            (year - 1) * int(YEAR)
            + mon0 * int(MONTH)
            + day0 * int(DAY)
            + hour * int(HOUR)
            + minute * int(MINUTE)
            + second * int(SECOND)
            + microsecond
        )

    @classmethod
    def from_earth(cls, earth: datetime, *, clock: Optional[FixedClock] = None) -> "Instant":
        """Vana'diel instant of a timezone-aware Earth datetime."""
        clock = clock or DEFAULT_CLOCK
        return cls(clock.to_game_time(datetime_to_us(earth)))

    @classmethod
    def from_int(cls, raw: int) -> "Instant":
        """Restore an instant from its stored microsecond count."""
        return cls(raw)

    def to_int(self) -> int:
        return self.raw

    def earth(self, *, clock: Optional[FixedClock] = None) -> datetime:
        """Earth time (UTC) of this instant; ValueError when it falls outside the datetime range."""
        clock = clock or DEFAULT_CLOCK
        return us_to_datetime(clock.to_real_time(self.raw))

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def is_zero(self) -> bool:
        return self.raw == 0

    def before(self, u: "Instant") -> bool:
        return self.raw < u.raw

    def after(self, u: "Instant") -> bool:
        return self.raw > u.raw

    def equal(self, u: "Instant") -> bool:
        return self.raw == u.raw

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, d: int) -> "Instant":
        return Instant(self.raw + int(d))

    def sub(self, u: "Instant") -> Duration:
        """
        Duration self - u. When the true difference does not fit in a
        Duration the result saturates to MIN_DURATION or MAX_DURATION.
        """
        d = Duration(self.raw - u.raw)
        if u.raw + int(d) == self.raw:
            return d
        if self.before(u):
            return MIN_DURATION
        return MAX_DURATION

    def add_date(self, years: int, months: int, days: int) -> "Instant":
        """Shift the calendar fields, keeping the time of day, and renormalize."""
        year, month, day, _ = self.date()
        hour, minute, sec = self.clock()
        return Instant.from_components(
            year + years, month + months, day + days, hour, minute, sec, self.microsecond
        )

    def truncate(self, d: int) -> "Instant":
        """
        Round down to a multiple of d since the epoch. This works on the
        absolute count, not the calendar presentation, so truncate(HOUR) may
        leave a non-zero minute for a clock whose epoch is not hour-aligned.
        d <= 0 returns the instant unchanged.
        """
        if d <= 0:
            return self
        return Instant(self.raw - self.raw % int(d))

    def round(self, d: int) -> "Instant":
        """
        Round to the nearest multiple of d since the epoch; halfway values
        round up (to the later instant). Note Duration.round breaks ties away
        from zero instead. d <= 0 returns the instant unchanged.
        """
        if d <= 0:
            return self
        d = int(d)
        r = self.raw % d
        if r + r < d:
            return Instant(self.raw - r)
        return Instant(self.raw + d - r)

    def __add__(self, other):
        if isinstance(other, int):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Instant):
            return self.sub(other)
        if isinstance(other, int):
            return self.add(-int(other))
        return NotImplemented

    # ---------------------------------------------------------
    # Calendar fields
    # ---------------------------------------------------------

    def date(self) -> Tuple[int, int, int, int]:
        """(year, month, day, year_day); year/month/day are 1-based."""
        t = self.raw
        year = t // int(YEAR) + 1
        month = t % int(YEAR) // int(MONTH) + 1
        day = t % int(MONTH) // int(DAY) + 1
        yday = (month - 1) * 30 + day
        return year, month, day, yday

    def clock(self) -> Tuple[int, int, int]:
        """(hour, minute, second) within the day."""
        t = self.raw
        hour = t % int(DAY) // int(HOUR)
        minute = t % int(HOUR) // int(MINUTE)
        sec = t % int(MINUTE) // int(SECOND)
        return hour, minute, sec

    @property
    def year(self) -> int:
        return self.date()[0]

    @property
    def month(self) -> int:
        return self.date()[1]

    @property
    def day(self) -> int:
        return self.date()[2]

    @property
    def year_day(self) -> int:
        """Day of the year, in 1..360."""
        return self.date()[3]

    @property
    def hour(self) -> int:
        return self.clock()[0]

    @property
    def minute(self) -> int:
        return self.clock()[1]

    @property
    def second(self) -> int:
        return self.clock()[2]

    @property
    def microsecond(self) -> int:
        return self.raw % int(SECOND)

    def weekday(self) -> Weekday:
        return weekday_of(self.raw)

    def moon(self) -> Moon:
        return Moon.of(self.raw)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def strftime(self, fmt: str, *, locale: Optional[str] = None, strict: bool = False) -> str:
        return _strftime(self, fmt, locale=locale, strict=strict)

    def __format__(self, spec: str) -> str:
        return self.strftime(spec) if spec else str(self)

    def __str__(self) -> str:
        return f"{self.strftime('%Y-%m-%d %H:%M:%S')} {self.weekday()} {self.moon()}"


def since(t: Instant) -> Duration:
    """Vana'diel time elapsed since t."""
    return Instant.now().sub(t)


def until(t: Instant) -> Duration:
    """Vana'diel time remaining until t."""
    return t.sub(Instant.now())
