from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute

def calendar(t) -> Dict[str, Any]:
    year, month, day, yday = t.date()
    hour, minute, second = t.clock()
    return {
        "year": year,
        "month": month,
        "day": day,
        "year_day": yday,
        "hour": hour,
        "minute": minute,
        "second": second,
        "microsecond": t.microsecond,
    }

def weekday(t) -> Dict[str, Any]:
    # Convention: 0=Firesday..7=Darksday
    w = t.weekday()
    return {"weekday": int(w), "weekday_name": str(w)}

def moon(t) -> Dict[str, Any]:
    m = t.moon()
    return {
        "moon_days": m.days,
        "moon_phase": int(m.phase()),
        "moon_phase_name": str(m.phase()),
        "moon_percent": m.percent(),
        "time_of_moon": m.time_of_moon,
    }

register_attribute("calendar", calendar)
register_attribute("weekday", weekday)
register_attribute("moon", moon)
