"""
Weekday and moon-phase name tables.

Tables are immutable tuples built once at import. Lookup is a pure function
of (table, locale tag, index); unknown tags fall back to DEFAULT_LOCALE.
"""
from __future__ import annotations

from typing import Mapping, Optional, Tuple

DEFAULT_LOCALE = "en"

DAY_NAMES: Mapping[str, Tuple[str, ...]] = {
    "en": (
        "Firesday",
        "Earthsday",
        "Watersday",
        "Windsday",
        "Iceday",
        "Lightningday",
        "Lightsday",
        "Darksday",
    ),
    "ja": (
        "火曜日",
        "土曜日",
        "水曜日",
        "風曜日",
        "氷曜日",
        "雷曜日",
        "光曜日",
        "闇曜日",
    ),
}

# The English client names 7 kinds of phases, the Japanese client 12.
MOON_NAMES: Mapping[str, Tuple[str, ...]] = {
    "en": (
        "New Moon",
        "Waxing Crescent",
        "Waxing Crescent",
        "First Quarter",
        "Waxing Gibbous",
        "Waxing Gibbous",
        "Full Moon",
        "Waning Gibbous",
        "Waning Gibbous",
        "Last Quarter",
        "Waning Crescent",
        "Waning Crescent",
    ),
    "ja": (
        "新月",
        "三日月",
        "七日月",
        "上弦の月",
        "十日夜",
        "十三夜",
        "満月",
        "十六夜",
        "居待月",
        "下弦の月",
        "二十日余月",
        "二十六夜",
    ),
}


def normalize_tag(tag: str) -> str:
    """'ja_JP.UTF-8' -> 'ja-jp'."""
    tag = tag.split(".", 1)[0].split("@", 1)[0]
    return tag.replace("_", "-").strip().lower()


def resolve_locale(tag: Optional[str], available: Mapping[str, object]) -> str:
    """
    Pick the configured locale closest to tag: exact match first, then the
    primary language subtag ('ja-JP' -> 'ja'), then DEFAULT_LOCALE.
    """
    if not tag:
        return DEFAULT_LOCALE
    norm = normalize_tag(tag)
    if norm in available:
        return norm
    primary = norm.split("-", 1)[0]
    if primary in available:
        return primary
    return DEFAULT_LOCALE


def lookup(table: Mapping[str, Tuple[str, ...]], locale: Optional[str], index: int) -> str:
    return table[resolve_locale(locale, table)][index]
