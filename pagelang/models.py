"""Pydantic v2 models: detection results and the HTTP request/response shapes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ── Detection results ───────────────────────────────────────────────────────

class DetectionSource(str, Enum):
    """Which cascade step produced a language."""

    ENCODING = "charset"
    MARKUP = "markup"
    TITLE = "title"
    BODY_RATIO = "body-ratio"
    STATISTICAL = "statistical"


class LanguageResult(BaseModel):
    """A detected language and its provenance, or the empty result.

    ``language`` and ``source`` are either both set or both ``None``.
    """

    model_config = ConfigDict(frozen=True)

    language: str | None = Field(default=None, pattern=r"^[a-z]{2}$")
    source: DetectionSource | None = None

    @model_validator(mode="after")
    def _paired(self) -> "LanguageResult":
        if (self.language is None) != (self.source is None):
            raise ValueError("language and source must be set together")
        return self

    @classmethod
    def empty(cls) -> "LanguageResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.language is None


# ── Request Models ──────────────────────────────────────────────────────────

class PageInput(BaseModel):
    """A single fetched page submitted for language detection."""

    html: str = Field(..., description="Decoded page HTML")
    charset: str = Field(default="", description="Resolved encoding name, e.g. GBK")
    list_mode: bool = Field(
        default=False, description="True for listing/index pages"
    )
    source_url: str = Field(default="", description="URL the page was fetched from")


class DetectRequest(BaseModel):
    """Batch detection request containing one or more pages."""

    pages: list[PageInput] = Field(..., min_length=1)


# ── Response Models ─────────────────────────────────────────────────────────

class PageLanguage(BaseModel):
    """Detection result for a single page."""

    source_url: str
    language: str | None
    source: DetectionSource | None


class DetectResponse(BaseModel):
    """Full batch detection response."""

    results: list[PageLanguage]
    total: int
    detected_count: int


# ── Health ──────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    """Response from /health endpoint."""

    status: str
    detector_loaded: bool
    uptime_seconds: float
