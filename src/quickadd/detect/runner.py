"""Run the task attribute detectors over a piece of text.

Every detector runs independently against the full input and the results are
concatenated in a fixed rule order: date keywords, clock time, priority
suffix, hashtag categories, duration.  Nothing is merged or short-circuited,
so overlapping detections from different rules are all returned.  Within a
rule the order is the detector's own (``today``, ``tomorrow``, ``next week``
for dates; the :class:`~quickadd.detect.base.Category` order for hashtags).
Callers that apply "first date wins" therefore get the earliest keyword in
that list, not the earliest position in the text.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from quickadd.utils.logging import get_logger

from . import categories, clock_time, dates, duration, priority
from .base import DetectionContext, Detection, Detector

__all__ = ["default_detectors", "run_detectors", "detect"]

log = get_logger(__name__)


def default_detectors() -> list[Detector]:
    """Return fresh instances of the built-in detectors in rule order."""

    return [
        dates.get_detector(),
        clock_time.get_detector(),
        priority.get_detector(),
        categories.get_detector(),
        duration.get_detector(),
    ]


def run_detectors(
    text: str,
    context: DetectionContext | None = None,
    detectors: Sequence[Detector] | None = None,
) -> list[Detection]:
    """Run ``detectors`` (the defaults when omitted) over ``text``."""

    if not text:
        return []
    active = default_detectors() if detectors is None else detectors
    found: list[Detection] = []
    for det in active:
        spans = det.detect(text, context)
        if spans:
            log.debug("%s: %d detection(s)", det.name(), len(spans))
        found.extend(spans)
    return found


def detect(text: str, *, today: date | None = None) -> list[Detection]:
    """Return every attribute detected in ``text``.

    ``today`` pins the reference date for relative keywords; the system date
    is used when it is omitted.  The call never raises and returns an empty
    list when nothing is recognised.
    """

    return run_detectors(text, DetectionContext(today=today))
