"""
vanatime.strftime
-----------------
Render a Vana'diel instant through a strftime-like template.

A directive is a percent character, zero or more flags, an optional minimum
field width and a conversion letter:

    %<flags><width><conversion>

Flags (applied left to right):

    -  don't pad a numerical output
    _  use spaces for padding
    0  use zeros for padding
    ^  upcase the result string
    #  change case (same as ^)

Zero padding goes between a leading minus sign and the digits, so %05Y of
year -5 renders "-0005" rather than "000-5".

Conversions:

    Date
      %Y  year with century, can be negative (-0001, 0000, 1995, 14292)
      %C  year // 100
      %y  year % 100 (00..99)
      %m  month of the year (01..12)
      %d  day of the month, zero-padded (01..30)
      %e  day of the month, blank-padded ( 1..30)
      %j  day of the year (001..360)

    Time
      %H  hour of the day, 24-hour clock, zero-padded (00..23)
      %k  hour of the day, 24-hour clock, blank-padded ( 0..23)
      %M  minute of the hour (00..59)
      %S  second of the minute (00..59)
      %L  millisecond of the second (000..999)
      %N  fractional second digits, width selects the digits (%3N, %6N, %9N)

    Weekday
      %A  full weekday name (Firesday); %^A gives FIRESDAY
      %w  day of the week (Firesday is 0, 0..7)

    Seconds since the epoch
      %s  whole seconds since C.E. 0001-01-01 00:00:00

    Literals
      %n  newline, %t  tab, %%  percent sign

    Combinations (expanded before anything else; flags and width on a
    combination are dropped)
      %F  %Y-%m-%d
      %T  %H:%M:%S
      %X  same as %T
      %R  %H:%M

Any other conversion letter renders as the empty string. Pass strict=True,
or call unknown_directives(), to catch such typos.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from .core.duration import SECOND
from .core.errors import FormatDirectiveError

if TYPE_CHECKING:
    from .core.instant import Instant

_SPACE_PADDED = frozenset("ekAnt%")

_DEFAULT_WIDTH: Dict[str, int] = {
    "y": 2, "m": 2, "d": 2, "e": 2, "H": 2, "k": 2, "M": 2, "S": 2,
    "j": 3, "L": 3,
    "N": 6,
}

_COMPOSITES: Dict[str, str] = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "X": "%H:%M:%S",
    "R": "%H:%M",
}

_COMPOSITE_RE = re.compile(r"%%|%([-_0^#]+)?(\d+)?([FXRT])")
_DIRECTIVE_RE = re.compile(r"%([-_0^#]+)?(\d+)?([A-Za-z%])")

_KNOWN = frozenset("YCymdejHkMSLNAwsnt%")


def default_padding(conversion: str) -> str:
    return " " if conversion in _SPACE_PADDED else "0"


def default_width(conversion: str) -> int:
    return _DEFAULT_WIDTH.get(conversion, 0)


def expand_composites(fmt: str) -> str:
    # "%%" is matched so that an escaped percent never starts a combination
    return _COMPOSITE_RE.sub(lambda m: _COMPOSITES[m.group(3)] if m.group(3) else m.group(0), fmt)


def unknown_directives(fmt: str) -> List[str]:
    """Directives in fmt that would silently render as the empty string."""
    fmt = expand_composites(fmt)
    return [m.group(0) for m in _DIRECTIVE_RE.finditer(fmt) if m.group(3) not in _KNOWN]


def _subsecond(usec: int, width: int) -> int:
    if width <= 6:
        return usec // (100000 // 10 ** (width - 1))
    return usec * 10 ** (width - 6)


def _pad(value: str, width: int, padding: str) -> str:
    length = len(value)
    if width <= 0 or not padding or length >= width:
        return value
    fill = padding * (width - length)
    if padding == "0" and value.startswith("-"):
        return "-" + fill + value[1:]
    return fill + value


def strftime(t: "Instant", fmt: str, *, locale: Optional[str] = None, strict: bool = False) -> str:
    """Format t according to the directives in fmt (see module docstring)."""
    if strict:
        bad = unknown_directives(fmt)
        if bad:
            raise FormatDirectiveError(f"unknown directives {bad} in format {fmt!r}")

    year, mon, day, yday = t.date()
    hour, minute, sec = t.clock()
    usec = t.microsecond
    wday = t.weekday()

    source: Dict[str, int] = {
        "Y": year, "C": year // 100, "y": year % 100,
        "m": mon, "d": day, "e": day, "j": yday,
        "H": hour, "k": hour, "M": minute, "S": sec,
        "w": int(wday), "s": t.to_int() // int(SECOND),
    }
    literals = {"n": "\n", "t": "\t", "%": "%"}

    def render(m: "re.Match[str]") -> str:
        flags = m.group(1) or ""
        width = int(m.group(2)) if m.group(2) else 0
        conversion = m.group(3)

        if conversion not in _KNOWN:
            return ""

        upcase = False
        padding = default_padding(conversion)
        if width == 0:
            width = default_width(conversion)

        for c in flags:
            if c == "-":
                padding = ""
            elif c == "_":
                padding = " "
            elif c == "0":
                padding = "0"
            elif c in "^#":
                upcase = True

        if conversion in "LN":
            value = str(_subsecond(usec, width))
        elif conversion == "A":
            value = wday.name_locale(locale)
        elif conversion in literals:
            value = literals[conversion]
        else:
            value = str(source[conversion])

        value = _pad(value, width, padding)
        return value.upper() if upcase else value

    return _DIRECTIVE_RE.sub(render, expand_composites(fmt))


def formatter(fmt: str, **kwargs) -> Callable[["Instant"], str]:
    """Bind a template once: formatter("%F")(t) == strftime(t, "%F")."""
    return lambda t: strftime(t, fmt, **kwargs)
