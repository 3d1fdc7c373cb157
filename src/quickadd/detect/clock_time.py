"""Clock time detector.

Matches the first ``at <hour>[:<minute>] [am|pm]`` phrase (case-insensitive)
and interprets it as a wall-clock time:

* the minute defaults to ``0`` when no ``:MM`` part is present;
* a ``pm`` marker adds twelve hours when the hour is below 12;
* without a marker the hour is kept as written, so ``at 5`` stays ``05:00``
  and ``at 17`` is ``17:00``.  Bare hours are ambiguous and are deliberately
  not reinterpreted;
* ``am`` never changes the hour, so ``at 12am`` reads as ``12:00``.

The phrase is not anchored to a word boundary: ``"chat 5"`` contains
``at 5``.  Numbers that cannot form a valid time fall back to the defaults
(hour ``9``, minute ``0``) instead of failing the call.
"""

from __future__ import annotations

import re
from datetime import time

from quickadd.utils.textspan import rtrim_whitespace

from .base import DetectionContext, DetectionKind, Detection

__all__ = ["ClockTimeDetector", "get_detector", "parse_clock", "DEFAULT_HOUR"]

DEFAULT_HOUR = 9

CLOCK_RX: re.Pattern[str] = re.compile(
    r"at\s+(?P<hour>\d{1,2})(?P<minute>:\d{2})?\s*(?P<meridiem>am|pm)?",
    re.IGNORECASE,
)


def _to_int(raw: str | None, default: int, upper: int) -> int:
    if not raw:
        return default
    try:
        number = int(raw)
    except ValueError:
        return default
    return number if 0 <= number <= upper else default


def parse_clock(hour_raw: str | None, minute_raw: str | None, meridiem: str | None) -> time:
    """Return the :class:`~datetime.time` described by the matched groups.

    An unreadable hour yields :data:`DEFAULT_HOUR` and ignores the meridiem.
    """

    minute = _to_int(minute_raw.lstrip(":") if minute_raw else None, 0, 59)
    hour = _to_int(hour_raw, -1, 23)
    if hour < 0:
        return time(DEFAULT_HOUR, minute)
    if meridiem and meridiem.lower() == "pm" and hour < 12:
        hour += 12
    return time(hour, minute)


class ClockTimeDetector:
    """Detect an ``at <time>`` phrase within text."""

    _confidence: float = 0.85

    def name(self) -> str:  # pragma: no cover - trivial
        return "clock_time"

    def detect(self, text: str, context: DetectionContext | None = None) -> list[Detection]:
        """Detect the first clock time in ``text``."""

        _ = context
        match = CLOCK_RX.search(text)
        if match is None:
            return []
        start, end = match.span()
        end = rtrim_whitespace(text, start, end)
        value = parse_clock(match.group("hour"), match.group("minute"), match.group("meridiem"))
        return [
            Detection(
                start,
                end,
                text[start:end],
                DetectionKind.TIME,
                value,
                self._confidence,
                "clock_time",
            )
        ]


def get_detector() -> ClockTimeDetector:
    """Return a :class:`ClockTimeDetector` instance."""

    return ClockTimeDetector()
