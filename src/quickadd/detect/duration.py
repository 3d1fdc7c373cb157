"""Duration detector.

Finds the first ``<number><unit>`` phrase such as ``45min``, ``2h`` or
``3 hours`` and converts it to minutes.  Units containing an ``h`` (``h``,
``hr``, ``hour``) count as hours; ``m`` and ``min`` count as minutes.  An
optional plural ``s`` is absorbed into the match.

The pattern carries no word boundaries, so ``"2 meetings"`` reads as two
minutes.  If the number cannot be read the duration defaults to 30 minutes.
"""

from __future__ import annotations

import re

from .base import DetectionContext, DetectionKind, Detection

__all__ = ["DurationDetector", "get_detector", "DEFAULT_MINUTES"]

DEFAULT_MINUTES = 30

DURATION_RX: re.Pattern[str] = re.compile(
    r"(?<!\d)(?P<amount>\d++)\s*(?P<unit>min|m|hour|h|hr)s?",
    re.IGNORECASE,
)


def to_minutes(amount_raw: str | None, unit: str) -> int:
    """Return ``amount_raw`` expressed in minutes."""

    try:
        amount = int(amount_raw or "")
    except ValueError:
        return DEFAULT_MINUTES
    return amount * 60 if "h" in unit.lower() else amount


class DurationDetector:
    """Detect the first duration phrase within text."""

    _confidence: float = 0.9

    def name(self) -> str:  # pragma: no cover - trivial
        return "duration"

    def detect(self, text: str, context: DetectionContext | None = None) -> list[Detection]:
        """Detect a duration in ``text``."""

        _ = context
        match = DURATION_RX.search(text)
        if match is None:
            return []
        start, end = match.span()
        return [
            Detection(
                start,
                end,
                text[start:end],
                DetectionKind.DURATION,
                to_minutes(match.group("amount"), match.group("unit")),
                self._confidence,
                "duration",
            )
        ]


def get_detector() -> DurationDetector:
    """Return a :class:`DurationDetector` instance."""

    return DurationDetector()
