# tests/test_clock.py

import pytest
import random
from datetime import datetime, timedelta, timezone

import vanatime
from vanatime.core import clock as ck
from vanatime.core.duration import YEAR

JST = timezone(timedelta(hours=9))


def test_epoch_anchor():
    """C.E. 0001-01-01 00:00:00 is 1967-02-10 00:00:00 JST."""
    vt = vanatime.date(1, 1, 1, 0, 0, 0, 0)
    assert vt.earth() == datetime(1967, 2, 10, 0, 0, 0, tzinfo=JST)

def test_from_earth_epoch():
    vt = vanatime.from_earth(datetime(1967, 2, 10, 0, 0, 0, tzinfo=JST))
    assert vt == vanatime.date(1, 1, 1)
    assert vt.is_zero()

def test_base_year_anchor():
    vt = vanatime.from_earth(datetime(2002, 1, 1, tzinfo=JST))
    assert vt == vanatime.date(ck.BASE_YEAR, 1, 1)
    assert vt.earth() == datetime(2002, 1, 1, tzinfo=JST)

def test_offset_constants():
    assert ck.BASE_TIME == 1102325760000000
    assert ck.VANA_EARTH_DIFF == ck.DEFAULT_CLOCK.offset == 92514960000000
    assert ck.to_real_time(0) == -91270800 * 10**6

def test_vana_variation():
    patterns = [
        (vanatime.date(1000, 3, 1, 0, 0, 0, 0), datetime(2006, 7, 3, 0, 0, 0, tzinfo=JST)),
        (vanatime.date(1000, 3, 2, 0, 0, 0, 0), datetime(2006, 7, 3, 0, 57, 36, tzinfo=JST)),
        (vanatime.date(1000, 3, 3, 0, 0, 0, 0), datetime(2006, 7, 3, 1, 55, 12, tzinfo=JST)),
    ]
    for vt, want in patterns:
        assert vt.earth() == want

def test_earth_round_trip():
    random.seed(42)
    lo = ck.datetime_to_us(datetime(1900, 1, 1, tzinfo=timezone.utc))
    hi = ck.datetime_to_us(datetime(2200, 1, 1, tzinfo=timezone.utc))
    for _ in range(10000):
        e = random.randint(lo, hi)
        assert ck.to_real_time(ck.to_game_time(e)) == e

def test_vana_round_trip_on_converted_instants():
    random.seed(7)
    for _ in range(10000):
        g = ck.to_game_time(random.randint(-10**15, 10**16))
        assert ck.to_game_time(ck.to_real_time(g)) == g

def test_vana_round_trip_floors_to_scale():
    """Game time is 25x finer than Earth microseconds; the inverse floors."""
    g = ck.to_game_time(1_500_000_000_000_000)
    for k in range(ck.TIME_SCALE):
        assert ck.to_real_time(g + k) == ck.to_real_time(g)
        assert ck.to_game_time(ck.to_real_time(g + k)) == g
    assert ck.to_real_time(g + ck.TIME_SCALE) == ck.to_real_time(g) + 1

def test_datetime_microseconds_survive():
    et = datetime(2018, 11, 1, 12, 34, 56, 789012, tzinfo=timezone.utc)
    assert vanatime.from_earth(et).earth() == et

def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        vanatime.from_earth(datetime(2018, 11, 1))

def test_fixed_clock_validation():
    with pytest.raises(ValueError):
        ck.FixedClock(scale=0)
    with pytest.raises(ValueError):
        ck.FixedClock(scale=7, base_year=1)

def test_custom_clock():
    """A clock anchored at the Unix epoch: 1970-01-01 UTC is C.E. 0001-01-01."""
    clock = ck.FixedClock(scale=ck.TIME_SCALE, base_year=1, earth_base_us=0)
    unix0 = datetime(1970, 1, 1, tzinfo=timezone.utc)
    vt = vanatime.from_earth(unix0, clock=clock)
    assert vt == vanatime.date(1, 1, 1)
    assert vt.earth(clock=clock) == unix0
    assert clock.to_real_time(clock.to_game_time(123456789)) == 123456789

def test_real_seconds():
    assert ck.DEFAULT_CLOCK.real_seconds(int(vanatime.SECOND)) == pytest.approx(0.04)
    assert ck.DEFAULT_CLOCK.real_seconds(int(vanatime.DAY)) == pytest.approx(57 * 60 + 36)
    assert ck.DEFAULT_CLOCK.real_seconds(int(YEAR)) == pytest.approx((14 * 24 + 9) * 3600 + 36 * 60)

@pytest.mark.parametrize("raw", [-(1 << 63), (1 << 63) - 1])
def test_earth_outside_datetime_range(raw):
    vt = vanatime.from_int(raw)
    # the integer conversion is total; only the datetime form is bounded
    assert isinstance(ck.to_real_time(raw), int)
    with pytest.raises(ValueError, match="datetime range"):
        vt.earth()
    with pytest.raises(ValueError):
        ck.us_to_datetime(ck.to_real_time(raw))
