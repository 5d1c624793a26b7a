"""Shared test fixtures.

Forces a throwaway result log and lazy detector loading before any
``pagelang`` module reads its settings.
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault(
    "LOG_PATH", os.path.join(tempfile.gettempdir(), "pagelang-test-detection.log")
)
os.environ.setdefault("PRELOAD_DETECTOR", "false")

import pytest  # noqa: E402


class FakeClassifier:
    """Statistical classifier stand-in that records every call."""

    def __init__(self, answer: str | None = None) -> None:
        self.answer = answer
        self.calls: list[tuple[str, frozenset[str]]] = []

    def classify(self, sample: str, candidates: frozenset[str]) -> str | None:
        self.calls.append((sample, candidates))
        if self.answer in candidates:
            return self.answer
        return None


@pytest.fixture
def fake_classifier():
    """Factory: ``fake_classifier("ko")`` answers ``ko`` when it is a candidate."""
    return FakeClassifier


def page(
    body: str = "",
    title: str = "",
    lang: str | None = None,
    head: str = "",
) -> str:
    """Build a minimal HTML page."""
    lang_attr = f' lang="{lang}"' if lang is not None else ""
    title_tag = f"<title>{title}</title>" if title else ""
    return (
        f"<!DOCTYPE html><html{lang_attr}><head>{title_tag}{head}</head>"
        f"<body>{body}</body></html>"
    )


def anchors(texts: list[str]) -> str:
    return "".join(f'<a href="/item/{i}">{t}</a>' for i, t in enumerate(texts))


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def make_anchors():
    return anchors
