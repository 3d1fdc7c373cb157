"""Relative date keyword detector.

Recognises three keywords anywhere in the text, case-insensitively and
without word boundaries:

=============  ===============  ==========
keyword        resolves to      confidence
=============  ===============  ==========
``today``      today            0.95
``tomorrow``   today + 1 day    0.95
``next week``  today + 7 days   0.9
=============  ===============  ==========

Only the first occurrence of each keyword is reported, but every keyword that
occurs yields its own detection.  Picking between them is left to the caller.
The reference date comes from :class:`~quickadd.detect.base.DetectionContext`
so results are reproducible under test.
"""

from __future__ import annotations

import re
from datetime import timedelta

from .base import DetectionContext, DetectionKind, Detection, resolve_today

__all__ = ["DateKeywordDetector", "get_detector"]

_KEYWORDS: tuple[tuple[re.Pattern[str], int, float], ...] = (
    (re.compile(r"today", re.IGNORECASE), 0, 0.95),
    (re.compile(r"tomorrow", re.IGNORECASE), 1, 0.95),
    (re.compile(r"next week", re.IGNORECASE), 7, 0.9),
)


class DateKeywordDetector:
    """Detect relative date keywords within text."""

    def name(self) -> str:  # pragma: no cover - trivial
        return "date_keyword"

    def detect(self, text: str, context: DetectionContext | None = None) -> list[Detection]:
        """Detect date keywords in ``text``."""

        today = resolve_today(context)
        spans: list[Detection] = []
        for rx, offset_days, confidence in _KEYWORDS:
            match = rx.search(text)
            if match is None:
                continue
            start, end = match.span()
            spans.append(
                Detection(
                    start,
                    end,
                    text[start:end],
                    DetectionKind.DATE,
                    today + timedelta(days=offset_days),
                    confidence,
                    "date_keyword",
                )
            )
        return spans


def get_detector() -> DateKeywordDetector:
    """Return a :class:`DateKeywordDetector` instance."""

    return DateKeywordDetector()
