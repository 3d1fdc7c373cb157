"""Exclamation-mark priority detector.

The number of trailing exclamation marks sets the priority.  Longer suffixes
are checked first so exactly one priority is reported per call:

=========  ========  ==========
suffix     priority  confidence
=========  ========  ==========
``!!!``    HIGH      1.0
``!!``     MEDIUM    1.0
``!``      LOW       0.9
=========  ========  ==========

The suffix must be the very last characters of the input; trailing
whitespace disables the rule.  More than three marks still count as ``!!!``.
"""

from __future__ import annotations

from .base import DetectionContext, DetectionKind, Detection, Priority

__all__ = ["PrioritySuffixDetector", "get_detector"]

_SUFFIXES: tuple[tuple[str, Priority, float], ...] = (
    ("!!!", Priority.HIGH, 1.0),
    ("!!", Priority.MEDIUM, 1.0),
    ("!", Priority.LOW, 0.9),
)


class PrioritySuffixDetector:
    """Detect a priority marker at the end of text."""

    def name(self) -> str:  # pragma: no cover - trivial
        return "priority_suffix"

    def detect(self, text: str, context: DetectionContext | None = None) -> list[Detection]:
        """Detect the trailing priority marker in ``text``."""

        _ = context
        for suffix, priority, confidence in _SUFFIXES:
            if text.endswith(suffix):
                start = len(text) - len(suffix)
                return [
                    Detection(
                        start,
                        len(text),
                        suffix,
                        DetectionKind.PRIORITY,
                        priority,
                        confidence,
                        "priority_suffix",
                    )
                ]
        return []


def get_detector() -> PrioritySuffixDetector:
    """Return a :class:`PrioritySuffixDetector` instance."""

    return PrioritySuffixDetector()
