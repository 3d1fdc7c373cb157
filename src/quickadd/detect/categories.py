"""Hashtag category detector."""

from __future__ import annotations

import re

from .base import Category, DetectionContext, DetectionKind, Detection

__all__ = ["HashtagCategoryDetector", "get_detector"]

# Plain substring search: "#workout" still reads as #work.
_HASHTAGS: tuple[tuple[re.Pattern[str], Category], ...] = tuple(
    (re.compile(re.escape(category.hashtag), re.IGNORECASE), category) for category in Category
)


class HashtagCategoryDetector:
    """Detect ``#category`` tags; each category is reported at most once."""

    _confidence: float = 0.95

    def name(self) -> str:  # pragma: no cover - trivial
        return "hashtag_category"

    def detect(self, text: str, context: DetectionContext | None = None) -> list[Detection]:
        _ = context
        spans: list[Detection] = []
        for rx, category in _HASHTAGS:
            match = rx.search(text)
            if match is None:
                continue
            start, end = match.span()
            spans.append(
                Detection(
                    start,
                    end,
                    text[start:end],
                    DetectionKind.CATEGORY,
                    category,
                    self._confidence,
                    "hashtag_category",
                )
            )
        return spans


def get_detector() -> HashtagCategoryDetector:
    """Return a :class:`HashtagCategoryDetector` instance."""

    return HashtagCategoryDetector()
