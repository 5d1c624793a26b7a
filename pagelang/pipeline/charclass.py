"""Character-class analysis over decoded code points.

Predicates classify single characters by Unicode script using sorted range
tables (looked up with ``bisect``); counters and ``ratio`` build on them.
"""

from __future__ import annotations

import bisect

# Unicode ``Script=Han`` (ideographs plus the iteration/number marks that
# are letters or numbers, not punctuation).
_HAN_RANGES: list[tuple[int, int]] = [
    (0x2E80, 0x2E99),    # CJK Radicals Supplement
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),    # Kangxi Radicals
    (0x3005, 0x3005),    # 々
    (0x3007, 0x3007),    # 〇
    (0x3021, 0x3029),    # Hangzhou numerals
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),    # Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xF900, 0xFA6D),    # Compatibility Ideographs
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B739),  # Extension C
    (0x2B740, 0x2B81D),  # Extension D
    (0x2B820, 0x2CEA1),  # Extension E
    (0x2CEB0, 0x2EBE0),  # Extension F
    (0x2F800, 0x2FA1D),  # Compatibility Supplement
    (0x30000, 0x3134A),  # Extension G
    (0x31350, 0x323AF),  # Extension H
]

# Unicode ``Script=Hiragana`` and ``Script=Katakana``
_KANA_RANGES: list[tuple[int, int]] = [
    (0x3041, 0x3096),    # Hiragana
    (0x309D, 0x309F),
    (0x30A1, 0x30FA),    # Katakana
    (0x30FD, 0x30FF),
    (0x31F0, 0x31FF),    # Katakana Phonetic Extensions
    (0x32D0, 0x32FE),    # Circled Katakana
    (0x3300, 0x3357),    # Squared Katakana
    (0xFF66, 0xFF6F),    # Halfwidth Katakana
    (0xFF71, 0xFF9D),
    (0x1AFF0, 0x1AFFE),
    (0x1B000, 0x1B122),  # Kana Supplement / Extended-A
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
    (0x1F200, 0x1F200),
]

_HAN_STARTS = [r[0] for r in _HAN_RANGES]
_KANA_STARTS = [r[0] for r in _KANA_RANGES]


def _in_ranges(cp: int, starts: list[int], ranges: list[tuple[int, int]]) -> bool:
    idx = bisect.bisect_right(starts, cp) - 1
    return idx >= 0 and ranges[idx][0] <= cp <= ranges[idx][1]


# ── Predicates ─────────────────────────────────────────────────────────────

def is_han(ch: str) -> bool:
    """Chinese ideograph (shared by Chinese and Japanese)."""
    return _in_ranges(ord(ch), _HAN_STARTS, _HAN_RANGES)


def is_kana(ch: str) -> bool:
    """Hiragana or Katakana."""
    return _in_ranges(ord(ch), _KANA_STARTS, _KANA_RANGES)


def is_latin_letter(ch: str) -> bool:
    """Basic ASCII letter ``a-z`` / ``A-Z``."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_latin_extended(ch: str) -> bool:
    """Code point in the Latin-1 Supplement block (U+0080..U+00FF)."""
    return 0x80 <= ord(ch) <= 0xFF


# ── Counters ───────────────────────────────────────────────────────────────

def count_han(text: str) -> int:
    return sum(1 for ch in text if is_han(ch))


def count_kana(text: str) -> int:
    return sum(1 for ch in text if is_kana(ch))


def count_latin(text: str) -> int:
    return sum(1 for ch in text if is_latin_letter(ch))


def count_latin_extended(text: str) -> int:
    return sum(1 for ch in text if is_latin_extended(ch))


def ratio(part: int, whole: int) -> float:
    """``part / whole``, or 0.0 for an empty whole."""
    if whole == 0:
        return 0.0
    return part / whole
