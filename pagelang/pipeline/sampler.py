"""Body sample extraction – picks the text that represents a page's language.

Listing pages are sampled from their anchor texts, content pages from their
paragraphs (falling back to the whole body when paragraphs are sparse).
"""

from __future__ import annotations

from bs4 import BeautifulSoup

# Listing pages with fewer anchors than this carry unreliable link text
MIN_LIST_ANCHORS = 16
# At most this many anchors / paragraphs are sampled
MAX_SAMPLE_ELEMENTS = 64
# Paragraph samples shorter than this are replaced by the full body text
MIN_PARAGRAPH_CHARS = 64
# Brace count that marks unrendered client-side template syntax
TEMPLATE_BRACE_LIMIT = 5


def _joined_text(elements, name: str) -> str:
    """Concatenate the text of *elements*, in document order.

    Unclosed tags (legacy ``<p>`` without ``</p>``) nest under html.parser; each
    text node is counted once, under its nearest *name* ancestor.
    """
    parts: list[str] = []
    for el in elements:
        for string in el.strings:
            if string.find_parent(name) is el:
                parts.append(string)
    return "".join(parts)


def _body_text(soup: BeautifulSoup) -> str:
    if soup.body is not None:
        return soup.body.get_text()
    # No <body> element: everything outside <head>/<title> is body content
    return "".join(
        s for s in soup.strings if s.find_parent(["head", "title"]) is None
    )


def _listing_sample(soup: BeautifulSoup) -> str:
    anchors = soup.find_all("a")
    if len(anchors) < MIN_LIST_ANCHORS:
        return ""

    text = _joined_text(anchors[:MAX_SAMPLE_ELEMENTS], "a")

    if (
        text.count("{") >= TEMPLATE_BRACE_LIMIT
        and text.count("}") >= TEMPLATE_BRACE_LIMIT
    ):
        return ""
    return text


def _content_sample(soup: BeautifulSoup) -> str:
    paragraphs = soup.find_all("p")
    text = _joined_text(paragraphs[:MAX_SAMPLE_ELEMENTS], "p")

    if len(text) < MIN_PARAGRAPH_CHARS:
        text = _body_text(soup)
    return text


def body_sample(soup: BeautifulSoup, list_mode: bool) -> str:
    """Return the raw (unnormalised) text sample for *soup*.

    Returns ``""`` when a listing page has too few anchors or its anchor text
    looks like leaked template markup.
    """
    if list_mode:
        return _listing_sample(soup)
    return _content_sample(soup)
