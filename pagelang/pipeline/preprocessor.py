"""HTML preprocessor – parses a fetched page into a noise-free document.

Strips elements whose text never reflects the page language (scripts,
styles, embedded frames, form text areas, hidden nodes) so that every
later stage can select elements and read their text directly.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment

# Elements that carry code, styling or embedded content rather than prose
_STRIP_TAGS = {
    "script", "style", "noscript",    # code / styling
    "iframe", "object", "embed",      # embedded content
    "svg", "canvas",                  # graphics
    "link", "br",                     # void elements
    "textarea", "template",           # non-rendered / user text
}

_MULTI_SPACE = re.compile(r"\s+")


def parse_document(raw_html: str) -> BeautifulSoup:
    """Parse *raw_html* and remove noise nodes.

    Steps
    -----
    1. Parse with BeautifulSoup (html.parser — no extra C dependency).
    2. Remove noise elements and anything carrying the ``hidden`` attribute.
    3. Remove HTML comments.

    An empty or whitespace-only input yields an empty document.
    """
    soup = BeautifulSoup(raw_html or "", "html.parser")

    # Nested noise is already gone once its ancestor is decomposed
    for element in soup.find_all(list(_STRIP_TAGS)):
        if not element.decomposed:
            element.decompose()

    for element in soup.find_all(attrs={"hidden": True}):
        if not element.decomposed:
            element.decompose()

    for comment in soup.find_all(string=lambda t: isinstance(t, Comment)):
        comment.extract()

    return soup


def extract_title(soup: BeautifulSoup) -> str:
    """Return the most representative page title, or ``""``.

    Prefers ``<title>``, then the Open Graph title, then the first ``<h1>``.
    """
    candidates: list[str] = []

    if soup.title is not None:
        candidates.append(soup.title.get_text())

    og_title = soup.select_one('meta[property="og:title" i]')
    if og_title is not None:
        candidates.append(og_title.get("content") or "")

    h1 = soup.find("h1")
    if h1 is not None:
        candidates.append(h1.get_text())

    for candidate in candidates:
        title = _MULTI_SPACE.sub(" ", candidate).strip()
        if title:
            return title
    return ""
