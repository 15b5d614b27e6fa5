"""
vanatime.attributes.moon
------------------------
Vana'diel moon: a lunar cycle of 84 days split into 12 phases of 7 days.

Sample illumination values along the cycle (the English client shows the
percentage, the Japanese client shows 12 phase names instead):

    0% NM   7% WXC  40% FQM  57% WXG   90% FM  93% WNG  60% LQM  43% WNC  10% NM
    2% NM  10% WXC  43% FQM  60% WXG   93% FM  90% WNG  57% LQM  40% WNC   7% NM
    5% NM  12% WXC  45% FQM  62% WXG   95% FM  88% WNG  55% LQM  38% WNC   5% NM

C.E. 0001-01-01 00:00:00 is a waxing crescent (19%), C.E. 0886-01-01
00:00:00 a new moon (10%).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..core.clock import MOON_CYCLE_DAYS
from ..core.duration import DAY
from .locales import DEFAULT_LOCALE, MOON_NAMES, lookup

# Calibration anchors: the phase index and illumination are offset from the
# epoch day by these many days.
PHASE_OFFSET_DAYS = 12
PERCENT_OFFSET_DAYS = 8
DAYS_PER_PHASE = 7


class MoonPhase(IntEnum):
    NEW_MOON = 0          # 新月
    WAXING_CRESCENT1 = 1  # 三日月
    WAXING_CRESCENT2 = 2  # 七日月
    FIRST_QUARTER = 3     # 上弦の月
    WAXING_GIBBOUS1 = 4   # 十日夜
    WAXING_GIBBOUS2 = 5   # 十三夜
    FULL_MOON = 6         # 満月
    WANING_GIBBOUS1 = 7   # 十六夜
    WANING_GIBBOUS2 = 8   # 居待月
    LAST_QUARTER = 9      # 下弦の月
    WANING_CRESCENT1 = 10  # 二十日余月
    WANING_CRESCENT2 = 11  # 二十六夜

    def __str__(self) -> str:
        return MOON_NAMES[DEFAULT_LOCALE][self.value]

    def name_locale(self, locale: Optional[str]) -> str:
        return lookup(MOON_NAMES, locale, self.value)


@dataclass(frozen=True)
class Moon:
    days: int          # whole days since the epoch
    time_of_moon: int  # microseconds into the current 7-day phase

    @classmethod
    def of(cls, raw_us: int) -> "Moon":
        days = raw_us // int(DAY)
        time_of_moon = ((days + PHASE_OFFSET_DAYS) % DAYS_PER_PHASE) * int(DAY) + raw_us % int(DAY)
        return cls(days=days, time_of_moon=time_of_moon)

    def phase(self) -> MoonPhase:
        return MoonPhase(((self.days + PHASE_OFFSET_DAYS) // DAYS_PER_PHASE) % len(MoonPhase))

    def percent(self) -> int:
        """
        Illumination as a triangular wave over the cycle:
          raw = round(((days + 8) mod 84) * 200 / 84), reflected above 100.
        """
        x = (self.days + PERCENT_OFFSET_DAYS) % MOON_CYCLE_DAYS
        # round half up in integers: floor(x*200/84 + 1/2)
        raw = (x * 400 + MOON_CYCLE_DAYS) // (2 * MOON_CYCLE_DAYS)
        if raw > 100:
            raw = 200 - raw
        return raw

    def __str__(self) -> str:
        return f"{self.phase()} ({self.percent()}%)"
