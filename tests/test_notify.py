# tests/test_notify.py
# One Vana'diel second is 40 ms of Earth time, so the short durations below
# keep these tests quick.

import queue
import threading
import time

import pytest

from vanatime import HOUR, MILLISECOND, SECOND, Instant
from vanatime.notify import Ticker, Timer, after, after_func, sleep, tick


def test_ticker_rejects_non_positive():
    with pytest.raises(ValueError):
        Ticker(0)
    with pytest.raises(ValueError):
        Ticker(-SECOND)
    assert tick(0) is None

def test_ticker_delivers_increasing_instants():
    with Ticker(SECOND) as t:
        assert t.interval == pytest.approx(0.04)
        a = t.c.get(timeout=2)
        b = t.c.get(timeout=2)
    assert isinstance(a, Instant)
    assert b.after(a)
    assert not t.running

def test_ticker_stop_is_idempotent():
    t = Ticker(SECOND)
    t.stop()
    t.stop()
    assert not t.running
    # drain whatever was queued before the stop; nothing arrives afterwards
    try:
        t.c.get_nowait()
    except queue.Empty:
        pass
    with pytest.raises(queue.Empty):
        t.c.get(timeout=0.2)

def test_ticker_drops_when_receiver_is_slow():
    with Ticker(100 * MILLISECOND) as t:
        time.sleep(0.1)
        assert t.c.qsize() <= 1

def test_tick():
    c = tick(SECOND)
    assert isinstance(c.get(timeout=2), Instant)

def test_timer_fires_once():
    t = Timer(SECOND)
    v = t.c.get(timeout=2)
    assert isinstance(v, Instant)
    with pytest.raises(queue.Empty):
        t.c.get(timeout=0.2)
    assert t.stop() is False

def test_timer_stop_before_fire():
    t = Timer(HOUR)
    assert t.stop() is True
    assert t.stop() is False
    assert t.c.empty()

def test_timer_reset():
    t = Timer(HOUR)
    assert t.reset(SECOND) is True
    assert isinstance(t.c.get(timeout=2), Instant)
    assert t.reset(SECOND) is False
    t.c.get(timeout=2)

def test_timer_with_callback():
    got = []
    done = threading.Event()

    def fire(v):
        got.append(v)
        done.set()

    Timer(SECOND, fire)
    assert done.wait(2)
    assert len(got) == 1 and isinstance(got[0], Instant)

def test_timer_non_positive_fires_immediately():
    assert isinstance(Timer(-SECOND).c.get(timeout=2), Instant)

def test_after():
    before = Instant.now()
    v = after(SECOND).get(timeout=2)
    assert not v.before(before)

def test_after_func():
    done = threading.Event()
    after_func(SECOND, done.set)
    assert done.wait(2)

def test_after_func_cancelled():
    done = threading.Event()
    t = after_func(HOUR, done.set)
    assert t.stop() is True
    assert not done.wait(0.1)

def test_sleep():
    start = time.monotonic()
    sleep(SECOND)
    assert time.monotonic() - start >= 0.03
    start = time.monotonic()
    sleep(0)
    sleep(-HOUR)
    assert time.monotonic() - start < 0.5

def test_ticker_concurrent_stop_waits_for_worker():
    t = Ticker(SECOND)
    t.c.get(timeout=2)
    after_stop = []

    def stopper():
        t.stop()
        after_stop.append(t.running)

    threads = [threading.Thread(target=stopper) for _ in range(4)]
    for th in threads:
        th.start()
    for th in threads:
        th.join(timeout=5)
    assert after_stop == [False] * 4
