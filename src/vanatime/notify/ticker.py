"""
vanatime.notify.ticker
----------------------
Periodic delivery of Vana'diel instants, driven by an Earth-time wake-up
thread. Each wake-up is converted with Instant.now() and offered on a
single-slot queue; a tick is dropped when the receiver has not consumed the
previous one, and missed intervals are skipped rather than bunched up.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Optional

from ..core.clock import DEFAULT_CLOCK, FixedClock
from ..core.instant import Instant

logger = logging.getLogger(__name__)


class Ticker:
    def __init__(self, d: int, *, clock: Optional[FixedClock] = None):
        if d <= 0:
            raise ValueError("non-positive interval for Ticker")
        self._clock = clock or DEFAULT_CLOCK
        self.interval = self._clock.real_seconds(int(d))  # Earth seconds
        self.c: "queue.Queue[Instant]" = queue.Queue(maxsize=1)
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread = threading.Thread(target=self._run, name="vanatime-ticker", daemon=True)
        self._thread.start()
        logger.debug("ticker started: every %s (%.6f s Earth)", d, self.interval)

    def _run(self) -> None:
        next_at = time.monotonic() + self.interval
        while not self._stop.wait(max(0.0, next_at - time.monotonic())):
            try:
                self.c.put_nowait(Instant.now(clock=self._clock))
            except queue.Full:
                logger.debug("ticker: receiver busy, tick dropped")
            next_at += self.interval
            now = time.monotonic()
            if next_at < now:
                next_at += (int((now - next_at) // self.interval) + 1) * self.interval

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def stop(self) -> None:
        """
        Stop the ticker and wait for its thread to exit. No tick is delivered
        after stop returns, from any caller; the queue is left as is. Repeated
        or concurrent calls are safe.
        """
        with self._lock:
            first = not self._stop.is_set()
            self._stop.set()
        # every caller waits for the worker, not only the first one
        if self._thread is not threading.current_thread():
            self._thread.join()
        if first:
            logger.debug("ticker stopped")

    def __enter__(self) -> "Ticker":
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


def tick(d: int) -> "Optional[queue.Queue[Instant]]":
    """
    Queue of a new Ticker, or None when d <= 0. The ticker cannot be stopped
    through the returned queue; use Ticker directly when that matters.
    """
    if d <= 0:
        return None
    return Ticker(d).c
