"""
vanatime.core.duration
----------------------
Elapsed Vana'diel time as a signed 64-bit microsecond count.

The unit constants follow the fixed Vana'diel ratios:

    1 minute = 60 s, 1 hour = 60 min, 1 day = 24 h,
    1 week = 8 days, 1 month = 30 days, 1 year = 12 months = 360 days.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Tuple

from .errors import DurationParseError, NanosecondUnitError

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def wrap_int64(x: int) -> int:
    """Two's-complement wrap of an unbounded int into the signed 64-bit range."""
    return ((x - _INT64_MIN) % (1 << 64)) + _INT64_MIN


def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """divmod with the quotient rounded toward zero (remainder takes the sign of a)."""
    q, r = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        q = -q
    if a < 0:
        r = -r
    return q, r


class Duration(int):
    """
    Vana'diel duration in microseconds.

    Arithmetic (+, -, *, unary -) returns Duration and wraps at the
    64-bit boundaries. Two rounding helpers are provided:

      truncate(m): toward zero to a multiple of m
      round(m):    nearest multiple of m, halves away from zero,
                   saturating at MIN_DURATION / MAX_DURATION

    Both return the zero duration when m <= 0.
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Duration":
        return super().__new__(cls, wrap_int64(int(value)))

    # -------- arithmetic --------

    def __add__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) - int(other))

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(other) - int(self))

    def __mul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) * int(other))

    __rmul__ = __mul__

    def __neg__(self) -> "Duration":
        return Duration(-int(self))

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return Duration(abs(int(self)))

    # -------- unit views --------

    def microseconds(self) -> int:
        return int(self)

    def seconds(self) -> float:
        sec, usec = trunc_divmod(int(self), int(SECOND))
        return float(sec) + float(usec) / 1e6

    def minutes(self) -> float:
        minute, usec = trunc_divmod(int(self), int(MINUTE))
        return float(minute) + float(usec) / (60 * 1e6)

    def hours(self) -> float:
        hour, usec = trunc_divmod(int(self), int(HOUR))
        return float(hour) + float(usec) / (60 * 60 * 1e6)

    # -------- rounding --------

    def truncate(self, m: int) -> "Duration":
        if m <= 0:
            return Duration(0)
        _, r = trunc_divmod(int(self), int(m))
        return Duration(int(self) - r)

    def round(self, m: int) -> "Duration":
        if m <= 0:
            return Duration(0)
        d, m = int(self), int(m)
        _, r = trunc_divmod(d, m)
        if d < 0:
            r = -r
            if r + r < m:
                return Duration(d + r)
            d1 = d - m + r
            if d1 >= _INT64_MIN:
                return Duration(d1)
            return MIN_DURATION
        if r + r < m:
            return Duration(d - r)
        d1 = d + m - r
        if d1 <= _INT64_MAX:
            return Duration(d1)
        return MAX_DURATION

    # -------- text --------

    def __repr__(self) -> str:
        return f"Duration({int(self)})"

    def __str__(self) -> str:
        """
        Render as "72h3m0.5s". Leading zero units are omitted; values under one
        second switch to ms or µs so the leading digit is non-zero. Zero is "0s".
        """
        d = int(self)
        if d == 0:
            return "0s"
        u = abs(d)
        if u < MILLISECOND:
            out = f"{u}µs"
        elif u < SECOND:
            out = f"{u // MILLISECOND}{_frac_digits(u % MILLISECOND, 3)}ms"
        else:
            secs, usec = divmod(u, int(SECOND))
            out = f"{secs % 60}{_frac_digits(usec, 6)}s"
            mins = secs // 60
            if mins > 0:
                out = f"{mins % 60}m" + out
                hours = mins // 60
                if hours > 0:
                    out = f"{hours}h" + out
        return "-" + out if d < 0 else out


def _frac_digits(v: int, prec: int) -> str:
    digits = f"{v:0{prec}d}".rstrip("0")
    return "." + digits if digits else ""


MIN_DURATION = Duration(_INT64_MIN)
MAX_DURATION = Duration(_INT64_MAX)

MICROSECOND = Duration(1)
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 8 * DAY
MONTH = 30 * DAY
YEAR = 360 * DAY


# ============================================================
# Parsing
# ============================================================

_UNITS = {
    "us": int(MICROSECOND),
    "µs": int(MICROSECOND),  # micro sign
    "μs": int(MICROSECOND),  # Greek small letter mu
    "ms": int(MILLISECOND),
    "s": int(SECOND),
    "m": int(MINUTE),
    "h": int(HOUR),
}

_COMPONENT_RE = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)", re.ASCII)


def parse_duration(s: str) -> Duration:
    """
    Parse a duration string: a possibly signed sequence of decimal numbers,
    each (ASCII digits only) with optional fraction and a unit suffix, such as "300ms", "-1.5h"
    or "2h45m". Valid units are "us" (or "µs"), "ms", "s", "m", "h".

    Nanoseconds are rejected with NanosecondUnitError; any other malformed
    input raises DurationParseError. Fractions below one microsecond are
    truncated toward zero.
    """
    orig = s
    if "ns" in s:
        raise NanosecondUnitError(f"vanatime: unknown unit ns in duration {orig!r}")

    neg = False
    if s and s[0] in "+-":
        neg = s[0] == "-"
        s = s[1:]
    if s == "0":
        return Duration(0)
    if not s:
        raise DurationParseError(f"vanatime: invalid duration {orig!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        m = _COMPONENT_RE.match(s, pos)
        whole, frac, unit = m.group(1), m.group(2) or "", m.group(3)
        if not whole and not frac:
            raise DurationParseError(f"vanatime: invalid duration {orig!r}")
        if not unit:
            raise DurationParseError(f"vanatime: missing unit in duration {orig!r}")
        if unit not in _UNITS:
            raise DurationParseError(f"vanatime: unknown unit {unit!r} in duration {orig!r}")
        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if frac:
            total += Fraction(int(frac) * scale, 10 ** len(frac))
        pos = m.end()

    usec = int(total)  # toward zero
    if neg:
        usec = -usec
    if not (_INT64_MIN <= usec <= _INT64_MAX):
        raise DurationParseError(f"vanatime: invalid duration {orig!r}")
    return Duration(usec)
