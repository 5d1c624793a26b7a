"""Cascade step 3 – languages declared in the markup.

Sources, in priority order:
* ``<html lang="...">``
* ``<html xml:lang="...">``
* ``<meta http-equiv="content-language" content="...">``
* ``<meta name="lang" content="...">``

Values must look like ``xx`` or ``xx-subtag``; anything else is skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from bs4 import BeautifulSoup

from pagelang.languages import META_LANGUAGE_SELECTORS
from pagelang.models import DetectionSource, LanguageResult

_LANG_VALUE = re.compile(r"^([a-z]{2}|[a-z]{2}-[a-z]+)$", re.IGNORECASE)

# Generic default that authoring tools leave in place; not trusted on its own
DEFAULT_DECLARED = "en"


def _declared_values(soup: BeautifulSoup) -> Iterator[str | None]:
    root = soup.find("html")
    if root is not None:
        yield root.get("lang")
        yield root.get("xml:lang")

    for selector in META_LANGUAGE_SELECTORS:
        meta = soup.select_one(selector)
        if meta is not None:
            yield meta.get("content")


def declared_language(soup: BeautifulSoup) -> str | None:
    """Return the first valid declared language code, or ``None``."""
    for value in _declared_values(soup):
        if not isinstance(value, str):
            continue
        value = value.strip()
        if _LANG_VALUE.match(value):
            return value[:2].lower()
    return None


def detect_from_markup(soup: BeautifulSoup) -> LanguageResult | None:
    """Trust a declaration only when it names something other than English."""
    lang = declared_language(soup)
    if not lang or lang == DEFAULT_DECLARED:
        return None
    return LanguageResult(language=lang, source=DetectionSource.MARKUP)
