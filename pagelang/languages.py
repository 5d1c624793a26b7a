"""Static, read-only lookup tables shared by every detection.

All tables are built once at import time and wrapped so they cannot be
mutated afterwards; concurrent detections read them without locking.
"""

from __future__ import annotations

from types import MappingProxyType

# ── Legacy encodings that are only ever used for one script ────────────────
CHARSET_LANGUAGES = MappingProxyType({
    "GBK": "zh",
    "Big5": "zh",
    "ISO-2022-CN": "zh",
    "EUC-CN": "zh",
    "SHIFT_JIS": "ja",
    "EUC-JP": "ja",
    "ISO-2022-JP": "ja",
    "EUC-KR": "ko",
    "ISO-2022-KR": "ko",
    "KOI8-R": "ru",
})

# ── Human-readable names (as shown to the crawler's operators) ─────────────
LANGUAGE_NAMES = MappingProxyType({
    "zh": "中文",
    "en": "英语",
    "ja": "日语",
    "ru": "俄语",
    "ko": "韩语",
    "ar": "阿拉伯语",
    "hi": "印地语",
    "de": "德语",
    "fr": "法语",
    "es": "西班牙语",
    "pt": "葡萄牙语",
    "it": "意大利语",
    "th": "泰语",
    "vi": "越南语",
    "my": "缅甸语",
})

NAME_LANGUAGES = MappingProxyType({name: code for code, name in LANGUAGE_NAMES.items()})

# ── Markup declarations, checked after <html lang> / <html xml:lang> ───────
META_LANGUAGE_SELECTORS: tuple[str, ...] = (
    'meta[http-equiv="content-language" i]',
    'meta[name="lang" i]',
)

# ── Candidate groups handed to the statistical detector ────────────────────
NON_LATIN_CANDIDATES: frozenset[str] = frozenset({"ar", "ru", "hi", "ko"})
LATIN_CANDIDATES: frozenset[str] = frozenset({"fr", "de", "es", "pt", "en"})


def language_name(code: str) -> str | None:
    """Return the display name for *code*, or ``None`` if unknown."""
    return LANGUAGE_NAMES.get(code.strip().lower())


def language_code(name: str) -> str | None:
    """Return the two-letter code for a display *name*, or ``None``."""
    return NAME_LANGUAGES.get(name.strip())
