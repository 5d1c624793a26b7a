"""Structured JSON logger for detection results.

Writes one JSON object per line to a log file (``settings.log_path`` unless
a path is passed).  Page content is *never* logged, only the outcome and its
inputs' metadata.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pagelang.config import settings
from pagelang.models import LanguageResult

# One file-backed logger per resolved log path
_loggers: dict[Path, logging.Logger] = {}
_loggers_lock = threading.Lock()


def _get_logger(log_path: str | Path | None = None) -> logging.Logger:
    """Return the JSON logger writing to *log_path*, creating it on first use."""
    path = Path(log_path or settings.log_path).resolve()
    logger = _loggers.get(path)
    if logger is not None:
        return logger

    with _loggers_lock:
        if path not in _loggers:
            path.parent.mkdir(parents=True, exist_ok=True)

            logger = logging.getLogger(f"pagelang.results.{len(_loggers)}")
            logger.setLevel(logging.INFO)
            logger.propagate = False

            handler = logging.FileHandler(str(path), encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(handler)
            _loggers[path] = logger
        return _loggers[path]


def configure_logging(level: str | None = None) -> None:
    """Set up console logging for the ``pagelang`` module loggers."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def log_detection(
    source_url: str,
    charset: str,
    list_mode: bool,
    result: LanguageResult,
    log_path: str | Path | None = None,
) -> None:
    """Append a structured JSON entry for one detected page."""
    entry: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source_url": source_url,
        "charset": charset,
        "list_mode": list_mode,
        "language": result.language,
        "source": result.source.value if result.source else None,
    }
    _get_logger(log_path).info(json.dumps(entry, ensure_ascii=False))
