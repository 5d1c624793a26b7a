from __future__ import annotations

import pytest

from pagelang.models import DetectionSource
from pagelang.pipeline.markup import declared_language, detect_from_markup
from pagelang.pipeline.preprocessor import parse_document


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ('<html lang="zh-CN"><body></body></html>', "zh"),
        ('<html lang=" ja "><body></body></html>', "ja"),
        ('<html lang="EN-us"><body></body></html>', "en"),
        ('<html lang="zh_CN" xml:lang="ko"><body></body></html>', "ko"),
        ('<html lang="en-001" xml:lang="pt-BR"><body></body></html>', "pt"),
    ],
)
def test_root_attributes(html, expected):
    assert declared_language(parse_document(html)) == expected


def test_http_equiv_meta_is_case_insensitive():
    html = (
        '<html lang="english"><head>'
        '<META HTTP-EQUIV="Content-Language" CONTENT="fr">'
        "</head></html>"
    )
    assert declared_language(parse_document(html)) == "fr"


def test_meta_name_lang():
    html = '<html><head><meta name="LANG" content="de-DE"></head></html>'
    assert declared_language(parse_document(html)) == "de"


def test_root_attribute_wins_over_meta():
    html = (
        '<html lang="ru"><head>'
        '<meta http-equiv="content-language" content="fr">'
        "</head></html>"
    )
    assert declared_language(parse_document(html)) == "ru"


def test_no_declaration():
    assert declared_language(parse_document("<html><body>x</body></html>")) is None


def test_malformed_values_are_skipped():
    html = '<html lang="" xml:lang="zh-Hans-CN"><head><meta name="lang" content="x"></head></html>'
    assert declared_language(parse_document(html)) is None


def test_markup_step_trusts_non_default():
    result = detect_from_markup(parse_document('<html lang="zh"></html>'))
    assert result is not None
    assert result.language == "zh"
    assert result.source is DetectionSource.MARKUP


def test_markup_step_distrusts_english_default():
    assert detect_from_markup(parse_document('<html lang="en-US"></html>')) is None
    assert detect_from_markup(parse_document("<html></html>")) is None
