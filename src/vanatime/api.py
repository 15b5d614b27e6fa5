from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from .attributes.registry import compute_attributes
from .attributes.registry import list_attributes as _list_attributes
from .core.clock import FixedClock
from .core.instant import Instant

DEFAULT_ATTRIBUTES = ("calendar", "weekday", "moon")

def now(*, clock: Optional[FixedClock] = None) -> Instant:
    """Current Vana'diel time."""
    return Instant.now(clock=clock)

def date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> Instant:
    return Instant.from_components(year, month, day, hour, minute, second, microsecond)

def from_earth(earth: datetime, *, clock: Optional[FixedClock] = None) -> Instant:
    return Instant.from_earth(earth, clock=clock)

def from_int(raw: int) -> Instant:
    return Instant.from_int(raw)

def list_attributes() -> list:
    return _list_attributes()

def info(
    t: Instant,
    *,
    attributes: Sequence[str] = DEFAULT_ATTRIBUTES,
    locale: Optional[str] = None,
    earth: bool = True,
) -> Dict[str, Any]:
    """
    Flat dict describing t: the requested attributes plus raw count and Earth
    time. "earth" is None when t lies outside the datetime range.
    """
    out: Dict[str, Any] = {"raw": t.to_int(), "text": str(t)}
    out.update(compute_attributes(t, attributes))
    if locale is not None:
        if "weekday" in attributes:
            out["weekday_name"] = t.weekday().name_locale(locale)
        if "moon" in attributes:
            out["moon_phase_name"] = t.moon().phase().name_locale(locale)
    if earth:
        try:
            out["earth"] = t.earth().isoformat()
        except ValueError:
            # no datetime form this far from the epoch
            out["earth"] = None
    return out
