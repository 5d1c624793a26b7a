"""FastAPI application – page language detection microservice.

Endpoints
---------
POST /detect    – detect the language of a batch of fetched pages
GET  /health    – detector status and service info
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pagelang.config import settings
from pagelang.logger import configure_logging, log_detection
from pagelang.models import (
    DetectRequest,
    DetectResponse,
    HealthResponse,
    PageLanguage,
)
from pagelang.pipeline import statistical
from pagelang.pipeline.orchestrator import detect_html

# ── Lifespan (profile loading at startup) ───────────────────────────────────

_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load langdetect profiles once at startup."""
    global _start_time
    _start_time = time.time()

    configure_logging()
    if settings.preload_detector:
        statistical.load_model()

    yield  # app is running


# ── Application ─────────────────────────────────────────────────────────────

app = FastAPI(
    title="Page Language Detector",
    version="1.0.0",
    lifespan=lifespan,
)


@app.post("/detect", response_model=DetectResponse)
def detect(request: DetectRequest) -> DetectResponse:
    """Detect the language of every page in the batch."""
    results: list[PageLanguage] = []
    for page in request.pages:
        result = detect_html(page.html, charset=page.charset, list_mode=page.list_mode)
        log_detection(
            source_url=page.source_url,
            charset=page.charset,
            list_mode=page.list_mode,
            result=result,
        )
        results.append(
            PageLanguage(
                source_url=page.source_url,
                language=result.language,
                source=result.source,
            )
        )

    return DetectResponse(
        results=results,
        total=len(results),
        detected_count=sum(1 for r in results if r.language is not None),
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Return service health and detector-load status."""
    return HealthResponse(
        status="ok",
        detector_loaded=statistical.is_loaded(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
