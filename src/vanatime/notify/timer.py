"""
vanatime.notify.timer
---------------------
One-shot delivery of a Vana'diel instant after a Vana'diel duration.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Callable, Optional

from ..core.clock import DEFAULT_CLOCK, FixedClock
from ..core.instant import Instant

logger = logging.getLogger(__name__)

FireFunc = Callable[[Instant], None]


class Timer:
    """
    Fires once after d. By default the fire time is put on the single-slot
    queue `c`; when fn is given it is called with the fire time instead.
    """

    def __init__(self, d: int, fn: Optional[FireFunc] = None, *, clock: Optional[FixedClock] = None):
        self._clock = clock or DEFAULT_CLOCK
        self._fn = fn
        self.c: "queue.Queue[Instant]" = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._active = False
        self._arm(d)

    def _arm(self, d: int) -> None:
        delay = self._clock.real_seconds(max(int(d), 0))
        stop = threading.Event()
        thread = threading.Thread(target=self._run, args=(delay, stop), name="vanatime-timer", daemon=True)
        with self._lock:
            self._stop = stop
            self._thread = thread
            self._active = True
        thread.start()
        logger.debug("timer armed: %s (%.6f s Earth)", d, delay)

    def _run(self, delay: float, stop: threading.Event) -> None:
        if stop.wait(delay):
            return
        with self._lock:
            if stop.is_set():
                return
            self._active = False
        value = Instant.now(clock=self._clock)
        if self._fn is not None:
            self._fn(value)
            return
        try:
            self.c.put_nowait(value)
        except queue.Full:
            logger.debug("timer: queue full, fire time dropped")

    def stop(self) -> bool:
        """
        Prevent the timer from firing and wait for its thread to exit.
        Returns True if the call stopped a pending timer, False if it had
        already fired or been stopped. The queue is not drained.
        """
        with self._lock:
            was_active = self._active
            self._active = False
            self._stop.set()
            thread = self._thread
        if thread is not threading.current_thread():
            thread.join()
        return was_active

    def reset(self, d: int) -> bool:
        """Re-arm the timer to fire after d; returns whether it had been pending."""
        was_active = self.stop()
        self._arm(d)
        return was_active


def after(d: int) -> "queue.Queue[Instant]":
    """Queue that receives the Vana'diel time once d has elapsed."""
    return Timer(d).c


def after_func(d: int, f: Callable[[], None]) -> Timer:
    """Call f in its own thread once d has elapsed; the Timer can cancel it."""
    def fire(_: Instant) -> None:
        threading.Thread(target=f, name="vanatime-after-func", daemon=True).start()
    return Timer(d, fire)


def sleep(d: int) -> None:
    """Block for the Earth-time equivalent of d; d <= 0 returns immediately."""
    if d <= 0:
        return
    time.sleep(DEFAULT_CLOCK.real_seconds(int(d)))
