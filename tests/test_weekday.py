# tests/test_weekday.py

import pytest

import vanatime
from vanatime import DAY, WEEK, Instant, Weekday
from vanatime.attributes.locales import DAY_NAMES, MOON_NAMES, normalize_tag, resolve_locale


def test_epoch_is_firesday():
    assert Instant().weekday() == Weekday.FIRESDAY
    assert vanatime.date(886, 1, 1).weekday() == Weekday.FIRESDAY

@pytest.mark.parametrize("y, m, d, want", [
    (1312, 12, 11, Weekday.ICEDAY),
    (1313, 1, 6, Weekday.LIGHTNINGDAY),
    (1312, 3, 5, Weekday.FIRESDAY),
])
def test_known_dates(y, m, d, want):
    assert vanatime.date(y, m, d, 23, 59, 59).weekday() == want

def test_week_cycles():
    t = vanatime.date(1000, 1, 1)
    first = t.weekday()
    for i in range(1, 8):
        assert int(t.add(i * DAY).weekday()) == (int(first) + i) % 8
    assert t.add(WEEK).weekday() == first
    assert t.add(-WEEK).weekday() == first

def test_before_epoch():
    assert Instant.from_int(-int(DAY)).weekday() == Weekday.DARKSDAY
    assert Instant.from_int(-int(WEEK)).weekday() == Weekday.FIRESDAY

def test_names():
    assert str(Weekday.LIGHTNINGDAY) == "Lightningday"
    assert Weekday.DARKSDAY.name_locale("en") == "Darksday"
    assert Weekday.DARKSDAY.name_locale("ja") == "闇曜日"
    assert Weekday.WATERSDAY.name_locale(None) == "Watersday"

def test_tables_are_complete():
    for table, size in ((DAY_NAMES, 8), (MOON_NAMES, 12)):
        assert set(table) == {"en", "ja"}
        assert all(len(names) == size for names in table.values())

@pytest.mark.parametrize("tag, want", [
    (None, "en"),
    ("", "en"),
    ("en", "en"),
    ("ja", "ja"),
    ("ja-JP", "ja"),
    ("ja_JP.UTF-8", "ja"),
    ("JA", "ja"),
    ("en_US@euro", "en"),
    ("de-DE", "en"),
])
def test_resolve_locale(tag, want):
    assert resolve_locale(tag, DAY_NAMES) == want

def test_normalize_tag():
    assert normalize_tag("ja_JP.UTF-8") == "ja-jp"
    assert normalize_tag("en-US") == "en-us"
