"""Cascade step 2 – listing-page titles.

Listing titles are short and templated (``日本語_新華網``): two or more Han
characters mean Chinese or Japanese, and the anchor text sample settles
which one by its kana share.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from pagelang.config import Settings
from pagelang.models import DetectionSource, LanguageResult
from pagelang.pipeline.charclass import count_han, count_kana, ratio
from pagelang.pipeline.normalizer import normalize_sample, strip_signs
from pagelang.pipeline.preprocessor import extract_title
from pagelang.pipeline.sampler import body_sample


def detect_from_title(
    soup: BeautifulSoup,
    list_mode: bool,
    settings: Settings,
) -> LanguageResult | None:
    """Return ``ja``/``zh`` for listing pages with a Han title, else ``None``."""
    if not list_mode:
        return None

    title = strip_signs(extract_title(soup)).strip()
    if count_han(title) < settings.title_min_han:
        return None

    sample = normalize_sample(body_sample(soup, list_mode))
    if ratio(count_kana(sample), len(sample)) > settings.kana_ratio_threshold:
        return LanguageResult(language="ja", source=DetectionSource.TITLE)
    return LanguageResult(language="zh", source=DetectionSource.TITLE)
