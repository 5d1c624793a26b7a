"""Cascade step 1 – language implied by a legacy multi-byte encoding."""

from __future__ import annotations

from pagelang.languages import CHARSET_LANGUAGES
from pagelang.models import DetectionSource, LanguageResult


def detect_from_charset(charset: str) -> LanguageResult | None:
    """Return the language tied to *charset*, or ``None``.

    The lookup is exact: callers pass the already-normalised encoding label.
    """
    if not charset:
        return None
    lang = CHARSET_LANGUAGES.get(charset)
    if lang is None:
        return None
    return LanguageResult(language=lang, source=DetectionSource.ENCODING)
