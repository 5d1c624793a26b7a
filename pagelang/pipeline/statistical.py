"""Statistical language detection restricted to a candidate set.

Uses the ``langdetect`` n-gram profiles.  Loading the profiles is the only
expensive step in the whole cascade, so a single ``DetectorFactory`` is built
lazily (once per process, behind a lock) and shared; every call creates its
own ``Detector`` from it, so concurrent calls share no mutable state.

Candidates are enforced with a langdetect prior map: languages outside the
set start at probability zero and stay there.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

from pagelang.config import settings

_log = logging.getLogger("pagelang.statistical")


class StatisticalClassifier(Protocol):
    """Anything that can pick one of *candidates* for a text sample."""

    def classify(self, sample: str, candidates: frozenset[str]) -> str | None:
        ...


class LangdetectClassifier:
    """``StatisticalClassifier`` backed by langdetect profiles."""

    def __init__(
        self,
        min_confidence: float | None = None,
        seed: int | None = None,
    ) -> None:
        self._min_confidence = (
            settings.statistical_min_confidence
            if min_confidence is None
            else min_confidence
        )
        self._seed = settings.langdetect_seed if seed is None else seed
        self._factory: DetectorFactory | None = None
        self._lock = threading.Lock()

    # ── Startup ────────────────────────────────────────────────────────────

    def load(self) -> DetectorFactory:
        """Build the shared factory on first use and return it."""
        factory = self._factory
        if factory is not None:
            return factory
        with self._lock:
            if self._factory is None:
                _log.info("Loading langdetect profiles from %s", PROFILES_DIRECTORY)
                factory = DetectorFactory()
                factory.load_profile(PROFILES_DIRECTORY)
                factory.seed = self._seed
                self._factory = factory
            return self._factory

    @property
    def is_loaded(self) -> bool:
        return self._factory is not None

    # ── Inference ──────────────────────────────────────────────────────────

    def classify(self, sample: str, candidates: frozenset[str]) -> str | None:
        """Return the best candidate for *sample*, or ``None`` if unsure."""
        if not sample or not candidates:
            return None

        factory = self.load()
        supported = candidates.intersection(factory.get_lang_list())
        if not supported:
            _log.warning("No langdetect profile for candidates %s", sorted(candidates))
            return None

        detector = factory.create()
        detector.set_prior_map({lang: 1.0 for lang in supported})
        detector.append(sample)

        try:
            probabilities = detector.get_probabilities()
        except LangDetectException as exc:
            _log.debug("langdetect gave up: %s", exc)
            return None

        best = next((p for p in probabilities if p.lang in supported), None)
        if best is None or best.prob < self._min_confidence:
            _log.debug("No confident match among %s", sorted(supported))
            return None
        return best.lang


# ── Module-level default (populated lazily or at service startup) ─────────

_default: LangdetectClassifier | None = None
_default_lock = threading.Lock()


def default_classifier() -> LangdetectClassifier:
    """Return the process-wide classifier, creating it on first call."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = LangdetectClassifier()
    return _default


def load_model() -> None:
    """Load langdetect profiles into the shared classifier now."""
    default_classifier().load()


def is_loaded() -> bool:
    return _default is not None and _default.is_loaded
