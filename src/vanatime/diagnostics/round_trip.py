#!/usr/bin/env python3
"""
Earth <-> Vana'diel round-trip sweep.

Draws random Earth microsecond stamps, converts them to Vana'diel time and
back with vectorised int64 arithmetic, and cross-checks a sample against
the scalar conversion used by Instant.
"""
from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from vanatime.core.clock import DEFAULT_CLOCK, FixedClock, datetime_to_us
from vanatime.core.duration import YEAR
from vanatime.core.instant import Instant

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "vanatime[diagnostics]"') from e


@dataclass(frozen=True)
class RoundTripReport:
    samples: int
    earth_failures: int   # real -> game -> real mismatches
    vana_failures: int    # game -> real -> game mismatches on scale-aligned instants
    scalar_failures: int  # vectorised vs scalar disagreements

    @property
    def ok(self) -> bool:
        return self.earth_failures == 0 and self.vana_failures == 0 and self.scalar_failures == 0


def to_game_array(np, real_us, clock: FixedClock = DEFAULT_CLOCK):
    return (real_us + np.int64(clock.offset)) * np.int64(clock.scale) - np.int64(int(YEAR))


def to_real_array(np, game_us, clock: FixedClock = DEFAULT_CLOCK):
    return np.floor_divide(game_us + np.int64(int(YEAR)), np.int64(clock.scale)) - np.int64(clock.offset)


def sweep(
    n: int,
    *,
    start: datetime,
    end: datetime,
    seed: int = 42,
    scalar_checks: int = 1000,
    clock: FixedClock = DEFAULT_CLOCK,
) -> RoundTripReport:
    np = _need_numpy()
    rng = np.random.default_rng(seed)
    lo, hi = datetime_to_us(start), datetime_to_us(end)
    real = rng.integers(lo, hi, size=n, dtype=np.int64)

    game = to_game_array(np, real, clock)
    back = to_real_array(np, game, clock)
    earth_failures = int(np.count_nonzero(back != real))

    # every game instant produced from an Earth stamp must survive game -> real -> game
    again = to_game_array(np, back, clock)
    vana_failures = int(np.count_nonzero(again != game))

    random.seed(seed)
    scalar_failures = 0
    for i in random.sample(range(n), min(scalar_checks, n)):
        g = clock.to_game_time(int(real[i]))
        if g != int(game[i]) or clock.to_real_time(g) != int(real[i]):
            scalar_failures += 1
            logger.warning("scalar mismatch at real_us=%d: game=%d vector=%d", int(real[i]), g, int(game[i]))

    return RoundTripReport(n, earth_failures, vana_failures, scalar_failures)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Earth <-> Vana'diel conversion round-trip sweep.")
    p.add_argument("-n", type=int, default=100000, help="Number of random Earth stamps.")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--start-year", type=int, default=1970)
    p.add_argument("--end-year", type=int, default=2100)
    args = p.parse_args(argv)

    start = datetime(args.start_year, 1, 1, tzinfo=timezone.utc)
    end = datetime(args.end_year, 1, 1, tzinfo=timezone.utc)
    rep = sweep(args.n, start=start, end=end, seed=args.seed)

    print(f"samples           : {rep.samples}")
    print(f"earth round trips : {rep.samples - rep.earth_failures} ok, {rep.earth_failures} failed")
    print(f"vana round trips  : {rep.samples - rep.vana_failures} ok, {rep.vana_failures} failed")
    print(f"scalar cross-check: {rep.scalar_failures} failed")
    print(f"range             : {Instant.from_earth(start)} .. {Instant.from_earth(end)}")
    return 0 if rep.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
