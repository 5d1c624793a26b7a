"""Pipeline orchestrator – runs the detection cascade for one page.

Steps run in a fixed confidence order and the first one that produces a
result wins:

1. Encoding      – legacy charsets tied to a single language.
2. Title         – listing pages with Han titles (Chinese vs. Japanese).
3. Markup        – declared ``lang`` other than the ``en`` default.
4. Body ratios   – UTF-* pages only; script ratios, then langdetect.

No step performs I/O and nothing is kept between calls, so ``detect_language``
may run concurrently for independent pages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup

from pagelang.config import Settings, settings as default_settings
from pagelang.models import LanguageResult
from pagelang.pipeline.body import detect_from_body
from pagelang.pipeline.charset import detect_from_charset
from pagelang.pipeline.markup import detect_from_markup
from pagelang.pipeline.preprocessor import parse_document
from pagelang.pipeline.statistical import StatisticalClassifier, default_classifier
from pagelang.pipeline.title import detect_from_title

_log = logging.getLogger("pagelang.orchestrator")


@dataclass(frozen=True)
class DetectionContext:
    """Everything a cascade step may look at for one page."""

    soup: BeautifulSoup
    charset: str
    list_mode: bool
    classifier: StatisticalClassifier
    settings: Settings


Step = Callable[[DetectionContext], "LanguageResult | None"]


# ── Cascade steps ─────────────────────────────────────────────────────────

def _encoding_step(ctx: DetectionContext) -> LanguageResult | None:
    return detect_from_charset(ctx.charset)


def _title_step(ctx: DetectionContext) -> LanguageResult | None:
    return detect_from_title(ctx.soup, ctx.list_mode, ctx.settings)


def _markup_step(ctx: DetectionContext) -> LanguageResult | None:
    return detect_from_markup(ctx.soup)


def _body_step(ctx: DetectionContext) -> LanguageResult | None:
    # Reached only when markup declared nothing or the "en" default.
    if not ctx.charset.startswith("UTF"):
        return None
    return detect_from_body(ctx.soup, ctx.list_mode, ctx.classifier, ctx.settings)


CASCADE: tuple[tuple[str, Step], ...] = (
    ("encoding", _encoding_step),
    ("title", _title_step),
    ("markup", _markup_step),
    ("body", _body_step),
)


# ── Public API ────────────────────────────────────────────────────────────

def detect_language(
    soup: BeautifulSoup,
    charset: str = "",
    list_mode: bool = False,
    classifier: StatisticalClassifier | None = None,
    settings: Settings | None = None,
) -> LanguageResult:
    """Detect the language of a parsed, noise-stripped page.

    Returns the empty ``LanguageResult`` when no step is confident.
    """
    ctx = DetectionContext(
        soup=soup,
        charset=charset or "",
        list_mode=list_mode,
        classifier=classifier if classifier is not None else default_classifier(),
        settings=settings if settings is not None else default_settings,
    )

    for name, step in CASCADE:
        result = step(ctx)
        if result is not None:
            _log.debug("Step %s -> %s", name, result.language)
            return result

    _log.debug("No step produced a language (charset=%r)", ctx.charset)
    return LanguageResult.empty()


def detect_html(
    raw_html: str,
    charset: str = "",
    list_mode: bool = False,
    classifier: StatisticalClassifier | None = None,
    settings: Settings | None = None,
) -> LanguageResult:
    """Parse *raw_html* and run :func:`detect_language` on it."""
    soup = parse_document(raw_html)
    return detect_language(
        soup,
        charset=charset,
        list_mode=list_mode,
        classifier=classifier,
        settings=settings,
    )
