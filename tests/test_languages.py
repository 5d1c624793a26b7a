from __future__ import annotations

import pytest

from pagelang.languages import (
    CHARSET_LANGUAGES,
    LANGUAGE_NAMES,
    LATIN_CANDIDATES,
    NAME_LANGUAGES,
    NON_LATIN_CANDIDATES,
    language_code,
    language_name,
)


@pytest.mark.parametrize("code", sorted(LANGUAGE_NAMES))
def test_name_round_trip(code):
    assert language_code(language_name(code)) == code


def test_maps_are_inverse():
    assert len(NAME_LANGUAGES) == len(LANGUAGE_NAMES)
    assert {v: k for k, v in NAME_LANGUAGES.items()} == dict(LANGUAGE_NAMES)


def test_lookup_helpers():
    assert language_name(" ZH ") == "中文"
    assert language_code("日语") == "ja"
    assert language_name("xx") is None
    assert language_code("Klingon") is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CHARSET_LANGUAGES["UTF-8"] = "en"  # type: ignore[index]
    with pytest.raises(TypeError):
        LANGUAGE_NAMES["xx"] = "?"  # type: ignore[index]


def test_every_charset_language_has_a_name():
    assert set(CHARSET_LANGUAGES.values()) <= set(LANGUAGE_NAMES)


def test_candidate_groups():
    assert NON_LATIN_CANDIDATES == {"ar", "ru", "hi", "ko"}
    assert LATIN_CANDIDATES == {"fr", "de", "es", "pt", "en"}
    assert not NON_LATIN_CANDIDATES & LATIN_CANDIDATES
