from __future__ import annotations

from enum import IntEnum
from typing import Optional

from ..core.duration import DAY, WEEK
from .locales import DAY_NAMES, DEFAULT_LOCALE, lookup


class Weekday(IntEnum):
    """Day of the Vana'diel week (Firesday = 0 .. Darksday = 7)."""
    FIRESDAY = 0
    EARTHSDAY = 1
    WATERSDAY = 2
    WINDSDAY = 3
    ICEDAY = 4
    LIGHTNINGDAY = 5
    LIGHTSDAY = 6
    DARKSDAY = 7

    def __str__(self) -> str:
        return DAY_NAMES[DEFAULT_LOCALE][self.value]

    def name_locale(self, locale: Optional[str]) -> str:
        return lookup(DAY_NAMES, locale, self.value)


def weekday_of(raw_us: int) -> Weekday:
    return Weekday(raw_us % int(WEEK) // int(DAY))
