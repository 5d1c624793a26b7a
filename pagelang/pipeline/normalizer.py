"""Sample normaliser – turns raw extracted text into the canonical sample.

The canonical sample is what the character-class ratios are computed over
and what the statistical detector receives.
"""

from __future__ import annotations

import unicodedata

# Fixed cost bound for downstream analysis (code points, not bytes)
BODY_CHUNK_SIZE = 2048
# Raw text beyond this multiple of the limit is never looked at
RAW_SAMPLE_FACTOR = 4


def _is_sign(ch: str) -> bool:
    """True for Unicode punctuation (P*) and symbol (S*) categories."""
    return unicodedata.category(ch)[0] in ("P", "S")


def strip_signs(text: str) -> str:
    """Remove every punctuation and symbol character from *text*."""
    return "".join(ch for ch in text if not _is_sign(ch))


def normalize_sample(text: str, limit: int = BODY_CHUNK_SIZE) -> str:
    """Return the canonical analysis sample for *text*.

    Steps
    -----
    1. Cap the raw text at ``RAW_SAMPLE_FACTOR * limit`` characters.
    2. Drop line breaks (``\\r`` and ``\\n``) entirely.
    3. Drop tab characters.
    4. Drop every pair of consecutive spaces (single spaces are kept so
       words stay separated).
    5. Remove punctuation and symbol characters.
    6. Keep the first *limit* characters and trim surrounding whitespace.
    """
    if not text:
        return ""

    text = text[: RAW_SAMPLE_FACTOR * limit]
    text = text.replace("\r", "").replace("\n", "")
    text = text.replace("\t", "")
    text = text.replace("  ", "")
    text = strip_signs(text)

    return text[:limit].strip()
