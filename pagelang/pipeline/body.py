"""Cascade step 4 – body text ratios, with statistical handoff.

Han-dominant samples are split into Chinese/Japanese by their kana share.
Latin-dominant samples are English unless they contain enough Latin-1
Supplement letters to suggest another Western European language, in which
case the statistical detector decides.  Everything else goes to the
statistical detector restricted to the major non-Latin scripts.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from pagelang.config import Settings
from pagelang.languages import LATIN_CANDIDATES, NON_LATIN_CANDIDATES
from pagelang.models import DetectionSource, LanguageResult
from pagelang.pipeline.charclass import (
    count_han,
    count_kana,
    count_latin,
    count_latin_extended,
    ratio,
)
from pagelang.pipeline.normalizer import normalize_sample
from pagelang.pipeline.sampler import body_sample
from pagelang.pipeline.statistical import StatisticalClassifier

_log = logging.getLogger("pagelang.body")


def _statistical(
    sample: str,
    candidates: frozenset[str],
    classifier: StatisticalClassifier,
) -> LanguageResult | None:
    lang = classifier.classify(sample, candidates)
    if not lang:
        return None
    return LanguageResult(language=lang, source=DetectionSource.STATISTICAL)


def classify_sample(
    sample: str,
    classifier: StatisticalClassifier,
    settings: Settings,
) -> LanguageResult | None:
    """Classify an already normalised *sample*."""
    total = len(sample)

    han = count_han(sample)
    if ratio(han, total) >= settings.han_dominance_threshold:
        if ratio(count_kana(sample), han) > settings.kana_ratio_threshold:
            return LanguageResult(language="ja", source=DetectionSource.BODY_RATIO)
        return LanguageResult(language="zh", source=DetectionSource.BODY_RATIO)

    if ratio(count_latin(sample), total) > settings.latin_dominance_threshold:
        if count_latin_extended(sample) > settings.latin_extended_gate:
            return _statistical(sample, LATIN_CANDIDATES, classifier)
        return LanguageResult(language="en", source=DetectionSource.BODY_RATIO)

    return _statistical(sample, NON_LATIN_CANDIDATES, classifier)


def detect_from_body(
    soup: BeautifulSoup,
    list_mode: bool,
    classifier: StatisticalClassifier,
    settings: Settings,
) -> LanguageResult | None:
    """Sample, normalise and classify the body of *soup*."""
    sample = normalize_sample(body_sample(soup, list_mode))
    _log.debug("Body sample: %d chars (list_mode=%s)", len(sample), list_mode)
    return classify_sample(sample, classifier, settings)
