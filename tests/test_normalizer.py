from __future__ import annotations

from pagelang.pipeline.normalizer import (
    BODY_CHUNK_SIZE,
    RAW_SAMPLE_FACTOR,
    normalize_sample,
    strip_signs,
)


def test_removes_line_breaks_tabs_and_punctuation():
    assert normalize_sample("Hello,\r\n world!\t") == "Hello world"


def test_double_spaces_are_dropped_single_spaces_kept():
    assert normalize_sample("a  b") == "ab"
    assert normalize_sample("a   b") == "a b"
    assert normalize_sample("a b") == "a b"


def test_removes_unicode_punctuation_and_symbols():
    # ： is punctuation, ¥ and © are symbols
    assert normalize_sample("价格：¥100 ©") == "价格100"


def test_truncates_before_trimming():
    text = " " + "a" * (BODY_CHUNK_SIZE - 1) + "b" * 10
    sample = normalize_sample(text)
    assert sample == "a" * (BODY_CHUNK_SIZE - 1)


def test_truncation_bound():
    assert len(normalize_sample("x" * 5000)) == BODY_CHUNK_SIZE


def test_empty_input():
    assert normalize_sample("") == ""
    assert normalize_sample("\n\t\n") == ""


def test_strip_signs_keeps_letters_and_spaces():
    assert strip_signs("日本語_新華網") == "日本語新華網"
    assert strip_signs("【新闻】 中心") == "新闻 中心"


def test_raw_text_is_capped_before_cleaning():
    # only the first RAW_SAMPLE_FACTOR * limit characters are examined
    text = "!" * (RAW_SAMPLE_FACTOR * BODY_CHUNK_SIZE) + "tail"
    assert normalize_sample(text) == ""
    assert normalize_sample("!" * 10 + "tail") == "tail"
