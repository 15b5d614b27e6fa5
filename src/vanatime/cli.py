from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone
import logging
import sys
import re
import importlib


_DATE_RE = re.compile(r"^-?\d{1,5}-\d{1,2}-\d{1,2}$")
_NEG_DATE_RE = re.compile(r"^-\d{1,5}-\d{1,2}-\d{1,2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{1,2}(:\d{1,2}(\.\d{1,6})?)?$")


def _shield_dates(argv: list[str]) -> list[str]:
    """
    argparse reads '-5-01-01' as an unknown option. A leading space keeps a
    negative Vana'diel date positional (or usable as an option value);
    _parse_vana strips it again.
    """
    return [" " + a if _NEG_DATE_RE.match(a) else a for a in argv]


def _parse_vana(date_s: str, time_s: str | None = None):
    """'YYYY-MM-DD' [+ 'HH:MM[:SS[.ffffff]]'] -> Instant."""
    import vanatime

    date_s = date_s.strip()
    if not _DATE_RE.match(date_s):
        raise SystemExit(f"bad date {date_s!r}, expected [-]YYYY-MM-DD")
    neg = date_s.startswith("-")
    y, m, d = map(int, date_s.lstrip("-").split("-"))
    if neg:
        y = -y
    hh = mm = ss = us = 0
    if time_s:
        if not _TIME_RE.match(time_s):
            raise SystemExit(f"bad time {time_s!r}, expected HH:MM[:SS[.ffffff]]")
        parts = time_s.split(":")
        hh, mm = int(parts[0]), int(parts[1])
        if len(parts) == 3:
            sec, _, frac = parts[2].partition(".")
            ss = int(sec)
            us = int(frac.ljust(6, "0")) if frac else 0
    return vanatime.date(y, m, d, hh, mm, ss, us)


def _tz(offset_hours: float) -> timezone:
    return timezone(timedelta(hours=offset_hours))


_DIAG_TOOLS = {
    "moon-cycle": "vanatime.diagnostics.moon_cycle",
    "round-trip": "vanatime.diagnostics.round_trip",
}


def _run_diag(tool: str, argv: list[str]) -> int:
    """Import a diagnostics module lazily (numpy stays optional) and run main(argv)."""
    mod = importlib.import_module(_DIAG_TOOLS[tool])
    return int(mod.main(argv) or 0)


def cmd_now(argv: list[str]) -> int:
    import vanatime

    p = argparse.ArgumentParser(prog="vanatime now", description="Print the current Vana'diel time")
    p.add_argument("--format", "-f", default=None, help="strftime-style template")
    p.add_argument("--locale", default=None, help="weekday-name locale (en, ja)")
    args = p.parse_args(argv)

    t = vanatime.now()
    print(t.strftime(args.format, locale=args.locale) if args.format else t)
    return 0


def cmd_from_earth(argv: list[str]) -> int:
    import vanatime

    p = argparse.ArgumentParser(prog="vanatime from-earth", description="Earth datetime -> Vana'diel time")
    p.add_argument("earth", help="ISO datetime, e.g. 2002-01-01T00:00:00+09:00")
    p.add_argument("--tz-offset", type=float, default=0.0, help="hours east of UTC for naive input")
    p.add_argument("--format", "-f", default=None)
    args = p.parse_args(argv)

    et = datetime.fromisoformat(args.earth)
    if et.tzinfo is None:
        et = et.replace(tzinfo=_tz(args.tz_offset))
    t = vanatime.from_earth(et)
    print(t.strftime(args.format) if args.format else t)
    return 0


def cmd_to_earth(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="vanatime to-earth", description="Vana'diel date -> Earth datetime")
    p.add_argument("date", help="Vana'diel YYYY-MM-DD")
    p.add_argument("time", nargs="?", default=None, help="HH:MM[:SS[.ffffff]]")
    p.add_argument("--tz-offset", type=float, default=0.0, help="hours east of UTC for the output")
    args = p.parse_args(_shield_dates(argv))

    t = _parse_vana(args.date, args.time)
    try:
        earth = t.earth()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(earth.astimezone(_tz(args.tz_offset)).isoformat())
    return 0


def cmd_format(argv: list[str]) -> int:
    import vanatime

    p = argparse.ArgumentParser(prog="vanatime format", description="Render a Vana'diel time through a template")
    p.add_argument("template", help="e.g. '%%Y/%%m/%%d %%H:%%M:%%S %%A'")
    p.add_argument("--date", default=None, help="Vana'diel YYYY-MM-DD (default: now)")
    p.add_argument("--time", default=None, help="HH:MM[:SS[.ffffff]]")
    p.add_argument("--locale", default=None)
    p.add_argument("--strict", action="store_true", help="fail on unknown directives")
    args = p.parse_args(_shield_dates(argv))

    t = _parse_vana(args.date, args.time) if args.date else vanatime.now()
    try:
        print(t.strftime(args.template, locale=args.locale, strict=args.strict))
    except vanatime.FormatDirectiveError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


def cmd_info(argv: list[str]) -> int:
    import vanatime

    p = argparse.ArgumentParser(prog="vanatime info", description="Vana'diel date -> calendar attributes")
    p.add_argument("date", nargs="?", default=None, help="Vana'diel YYYY-MM-DD (default: now)")
    p.add_argument("time", nargs="?", default=None, help="HH:MM[:SS[.ffffff]]")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p.add_argument("--locale", default=None)
    args = p.parse_args(_shield_dates(argv))

    t = _parse_vana(args.date, args.time) if args.date else vanatime.now()
    attrs = tuple(args.attr) or vanatime.api.DEFAULT_ATTRIBUTES
    for k, v in vanatime.info(t, attributes=attrs, locale=args.locale).items():
        print(f"{k:<16} {v}")
    return 0


def cmd_duration(argv: list[str]) -> int:
    import vanatime

    p = argparse.ArgumentParser(prog="vanatime duration", description="Parse and normalize a Vana'diel duration")
    p.add_argument("text", help="e.g. 2h45m, -1.5h, 300ms")
    p.add_argument("--round", default=None, help="round to this duration")
    p.add_argument("--truncate", default=None, help="truncate to this duration")
    args = p.parse_args(argv)

    try:
        d = vanatime.parse_duration(args.text)
        if args.round:
            d = d.round(vanatime.parse_duration(args.round))
        if args.truncate:
            d = d.truncate(vanatime.parse_duration(args.truncate))
    except vanatime.DurationParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(f"{d}  ({d.microseconds()} us, {vanatime.DEFAULT_CLOCK.real_seconds(int(d)):.6f} Earth s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `vanatime YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_info(argv)

    p = argparse.ArgumentParser(prog="vanatime", description="Vana'diel time toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("now", help="Current Vana'diel time")
    sub.add_parser("from-earth", help="Earth datetime -> Vana'diel time")
    sub.add_parser("to-earth", help="Vana'diel date -> Earth datetime")
    sub.add_parser("format", help="Render a Vana'diel time through a template")
    sub.add_parser("info", help="Vana'diel date -> calendar attributes")
    sub.add_parser("duration", help="Parse and normalize a Vana'diel duration")

    p_diag = sub.add_parser("diag", help="Diagnostics (lunar cycle table, conversion sweep)")
    p_diag.add_argument("tool", choices=sorted(_DIAG_TOOLS))

    args, rest = p.parse_known_args(_shield_dates(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    commands = {
        "now": cmd_now,
        "from-earth": cmd_from_earth,
        "to-earth": cmd_to_earth,
        "format": cmd_format,
        "info": cmd_info,
        "duration": cmd_duration,
    }
    if args.cmd == "diag":
        return _run_diag(args.tool, rest)
    return commands[args.cmd](rest)


if __name__ == "__main__":
    raise SystemExit(main())
