"""Centralised, env-driven configuration using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """All tunables are loaded from environment variables (or .env file)."""

    # ── Body-ratio thresholds ───────────────────────────────────────────────
    han_dominance_threshold: float = Field(
        default=0.38, alias="HAN_DOMINANCE_THRESHOLD"
    )
    latin_dominance_threshold: float = Field(
        default=0.38, alias="LATIN_DOMINANCE_THRESHOLD"
    )
    kana_ratio_threshold: float = Field(default=0.10, alias="KANA_RATIO_THRESHOLD")

    # Latin-1 Supplement characters required before asking the statistical
    # detector to separate French/German/Spanish/Portuguese from English.
    latin_extended_gate: int = Field(default=3, alias="LATIN_EXTENDED_GATE")

    # ── Listing-page title heuristic ────────────────────────────────────────
    title_min_han: int = Field(default=2, alias="TITLE_MIN_HAN")

    # ── Statistical detector (langdetect) ───────────────────────────────────
    statistical_min_confidence: float = Field(
        default=0.5, alias="STATISTICAL_MIN_CONFIDENCE"
    )
    langdetect_seed: int = Field(default=0, alias="LANGDETECT_SEED")
    preload_detector: bool = Field(default=True, alias="PRELOAD_DETECTOR")

    # ── Logging ─────────────────────────────────────────────────────────────
    log_path: str = Field(default="/logs/detection.log", alias="LOG_PATH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }


# Module-level singleton – import this everywhere
settings = Settings()
