#!/usr/bin/env python3
"""
Tabulate (and optionally plot) one Vana'diel lunar cycle: phase name and
illumination for each of the 84 days starting at a given Vana'diel date.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from vanatime.attributes.moon import PERCENT_OFFSET_DAYS
from vanatime.core.clock import MOON_CYCLE_DAYS
from vanatime.core.duration import DAY
from vanatime.core.instant import Instant


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "vanatime[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "vanatime[diagnostics]"') from e


def cycle_rows(start: Instant, *, locale: Optional[str] = None) -> List[Tuple[str, int, str, int]]:
    """(date, weekday, phase name, percent) for each day of one cycle."""
    rows = []
    for k in range(MOON_CYCLE_DAYS):
        t = start.add(k * DAY)
        m = t.moon()
        rows.append((t.strftime("%F"), int(t.weekday()), m.phase().name_locale(locale), m.percent()))
    return rows


def percent_wave(np, days):
    """Vectorised Moon.percent over an array of day counts since the epoch."""
    x = np.mod(days + PERCENT_OFFSET_DAYS, MOON_CYCLE_DAYS)
    raw = (x * 400 + MOON_CYCLE_DAYS) // (2 * MOON_CYCLE_DAYS)
    return np.where(raw > 100, 200 - raw, raw)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print one Vana'diel lunar cycle (84 days).")
    p.add_argument("--start", default="0886-01-01", help="Vana'diel date YYYY-MM-DD (default: 0886-01-01)")
    p.add_argument("--locale", default=None, help="Phase-name locale (en, ja)")
    p.add_argument("--plot", default=None, help="Write an illumination plot to this .png path")
    args = p.parse_args(argv)

    y, m, d = map(int, args.start.split("-"))
    start = Instant.from_components(y, m, d)

    print(f"{'date':<12} {'wd':>2}  {'phase':<16} {'%':>4}")
    for date_s, wd, phase, pct in cycle_rows(start, locale=args.locale):
        print(f"{date_s:<12} {wd:>2}  {phase:<16} {pct:>4}")

    if args.plot:
        np = _need_numpy()
        plt = _need_matplotlib()

        day0 = start.to_int() // int(DAY)
        days = np.arange(day0, day0 + MOON_CYCLE_DAYS, dtype=np.int64)
        pct = percent_wave(np, days)

        fig, ax = plt.subplots(figsize=(9.2, 3.6), constrained_layout=True)
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)
        ax.step(days - day0, pct, where="post", color="tab:blue", linewidth=1.4)
        ax.set_xlabel(f"Days since {args.start}")
        ax.set_ylabel("Illumination (%)")
        ax.set_ylim(-2, 102)
        ax.set_title("Vana'diel lunar cycle")
        fig.savefig(args.plot, dpi=200)
        print(f"Saved: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
