from __future__ import annotations

import pytest

from pagelang.pipeline.charclass import (
    count_han,
    count_kana,
    count_latin,
    count_latin_extended,
    is_han,
    is_kana,
    is_latin_extended,
    is_latin_letter,
    ratio,
)


@pytest.mark.parametrize("ch", ["中", "國", "々", "〇", "\U00020000", "㐀"])
def test_han_characters(ch):
    assert is_han(ch)


@pytest.mark.parametrize("ch", ["あ", "a", "한", "。", "1", "カ"])
def test_not_han(ch):
    assert not is_han(ch)


@pytest.mark.parametrize("ch", ["あ", "ん", "カ", "ヴ", "ｶ", "ㇰ"])
def test_kana_characters(ch):
    assert is_kana(ch)


@pytest.mark.parametrize("ch", ["中", "a", "한", "、"])
def test_not_kana(ch):
    assert not is_kana(ch)


def test_latin_letters_are_ascii_only():
    assert is_latin_letter("a")
    assert is_latin_letter("Z")
    assert not is_latin_letter("é")
    assert not is_latin_letter("1")


def test_latin_extended_is_latin1_supplement():
    assert is_latin_extended("é")
    assert is_latin_extended("ß")
    assert is_latin_extended("\u0080")
    assert is_latin_extended("ÿ")
    assert not is_latin_extended("a")
    assert not is_latin_extended("Ā")


def test_counters():
    text = "中文abc日本です café"
    assert count_han(text) == 4
    assert count_kana(text) == 2
    assert count_latin(text) == 6
    assert count_latin_extended(text) == 1


def test_ratio_guards_empty_whole():
    assert ratio(0, 0) == 0.0
    assert ratio(3, 0) == 0.0
    assert ratio(1, 4) == 0.25
