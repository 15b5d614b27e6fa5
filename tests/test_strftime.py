# tests/test_strftime.py

import pytest

import vanatime
from vanatime import FormatDirectiveError, Instant, strftime, unknown_directives
from vanatime.strftime import default_padding, default_width, expand_composites, formatter


T = vanatime.date(1312, 3, 5, 7, 8, 9, 123456)  # a Firesday


@pytest.mark.parametrize("fmt, want", [
    ("%Y", "1312"),
    ("%C", "13"),
    ("%y", "12"),
    ("%m", "03"),
    ("%d", "05"),
    ("%e", " 5"),
    ("%j", "065"),
    ("%H", "07"),
    ("%k", " 7"),
    ("%M", "08"),
    ("%S", "09"),
    ("%L", "123"),
    ("%N", "123456"),
    ("%3N", "123"),
    ("%1N", "1"),
    ("%9N", "123456000"),
    ("%A", "Firesday"),
    ("%w", "0"),
    ("%s", "40782899289"),
    ("%n", "\n"),
    ("%t", "\t"),
    ("%%", "%"),
])
def test_conversions(fmt, want):
    assert T.strftime(fmt) == want

@pytest.mark.parametrize("fmt, want", [
    ("%-d", "5"),
    ("%-j", "65"),
    ("%-H", "7"),
    ("%_m", " 3"),
    ("%0e", "05"),
    ("%0k", "07"),
    ("%05d", "00005"),
    ("%_5Y", " 1312"),
    ("%6Y", "001312"),
    ("%10A", "  Firesday"),
    ("%-10A", "Firesday"),
    ("%^A", "FIRESDAY"),
    ("%#A", "FIRESDAY"),
    ("%^10A", "  FIRESDAY"),
    ("%-_d", " 5"),
    ("%_-d", "5"),
])
def test_flags_and_width(fmt, want):
    assert T.strftime(fmt) == want

@pytest.mark.parametrize("fmt, want", [
    ("%F", "1312-03-05"),
    ("%T", "07:08:09"),
    ("%X", "07:08:09"),
    ("%R", "07:08"),
    ("%-F", "1312-03-05"),
    ("%^10T", "07:08:09"),
    ("%F %T.%L", "1312-03-05 07:08:09.123"),
    ("%%F", "%F"),
    ("%%%F", "%1312-03-05"),
])
def test_composites(fmt, want):
    assert T.strftime(fmt) == want

def test_expand_composites():
    assert expand_composites("%F %T") == "%Y-%m-%d %H:%M:%S"
    assert expand_composites("%%T") == "%%T"

def test_years():
    assert vanatime.date(1, 1, 1).strftime("%Y") == "1"
    assert vanatime.date(1, 1, 1).strftime("%4Y") == "0001"
    assert vanatime.date(14292, 1, 1).strftime("%Y %C %y") == "14292 142 92"

def test_negative_years():
    t = vanatime.date(-5, 1, 1)
    assert t.strftime("%Y") == "-5"
    assert t.strftime("%05Y") == "-0005"
    assert t.strftime("%_5Y") == "   -5"
    assert t.strftime("%C %y") == "-1 95"
    assert vanatime.date(0, 12, 30).strftime("%Y-%m-%d") == "0-12-30"

def test_epoch_seconds_floor():
    assert Instant.from_int(-1).strftime("%s") == "-1"
    assert Instant.from_int(999999).strftime("%s") == "0"

def test_unknown_directives_render_empty():
    assert T.strftime("a%Qb") == "ab"
    assert T.strftime("%-5Z|%E") == "|"
    assert T.strftime("100%") == "100%"
    assert T.strftime("plain text") == "plain text"

def test_unknown_directives_listed():
    assert unknown_directives("%Y %Q %-5Z %F %%") == ["%Q", "%-5Z"]
    assert unknown_directives("%F %T %A") == []

def test_strict():
    with pytest.raises(FormatDirectiveError):
        T.strftime("%Y %Q", strict=True)
    with pytest.raises(ValueError):
        strftime(T, "%E", strict=True)
    assert T.strftime("%F", strict=True) == "1312-03-05"

def test_locale():
    assert T.strftime("%A", locale="ja") == "火曜日"
    assert T.strftime("%^A", locale="ja-JP") == "火曜日"
    assert T.strftime("%A", locale="xx") == "Firesday"

def test_defaults():
    assert default_width("Y") == 0
    assert default_width("j") == 3
    assert default_width("N") == 6
    assert default_padding("e") == " "
    assert default_padding("d") == "0"

def test_formatter_and_format_protocol():
    iso = formatter("%F %T")
    assert iso(T) == "1312-03-05 07:08:09"
    assert f"{T:%Y/%m/%d}" == "1312/03/05"
    assert f"{T}" == str(T)
    assert str(T) == "1312-03-05 07:08:09 Firesday " + str(T.moon())
