"""Natural language detection for crawled web pages."""

from pagelang.models import DetectionSource, LanguageResult
from pagelang.pipeline.orchestrator import detect_html, detect_language

__all__ = ["DetectionSource", "LanguageResult", "detect_html", "detect_language"]
