"""Core detection model and protocol definitions.

This module defines the strongly‑typed primitives shared by all task attribute
detectors.  Spans follow the half‑open interval convention ``[start, end)``
where ``start`` is inclusive and ``end`` is exclusive, and always index into
the caller's unmodified input.

A :class:`Detection` is a tagged record: its ``kind`` decides the type of its
``value``.

===========  =========================
kind         value
===========  =========================
DATE         :class:`datetime.date`
TIME         :class:`datetime.time`
PRIORITY     :class:`Priority`
CATEGORY     :class:`Category`
DURATION     ``int`` (minutes)
===========  =========================

The pairing is checked when a detection is constructed so that consumers can
rely on it without runtime type checks of their own.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union, runtime_checkable

from quickadd.utils.errors import PayloadTypeError, SpanOutOfBoundsError

__all__ = [
    "DetectionKind",
    "Priority",
    "Category",
    "DetectionValue",
    "Detection",
    "Detector",
    "DetectionContext",
    "resolve_today",
]


class DetectionKind(Enum):
    """Closed set of attributes the detectors can discover."""

    DATE = "DATE"
    TIME = "TIME"
    PRIORITY = "PRIORITY"
    CATEGORY = "CATEGORY"
    DURATION = "DURATION"


class Priority(Enum):
    """Task urgency, ordered from least to most urgent."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Category(Enum):
    """Fixed task categories addressable through hashtags."""

    WORK = "Work"
    PERSONAL = "Personal"
    HEALTH = "Health"
    ERRANDS = "Errands"
    LEARNING = "Learning"
    CREATIVE = "Creative"

    @property
    def hashtag(self) -> str:
        return f"#{self.value.lower()}"


DetectionValue = Union[dt.date, dt.time, Priority, Category, int]


def _value_matches(kind: DetectionKind, value: object) -> bool:
    if kind is DetectionKind.DATE:
        return isinstance(value, dt.date) and not isinstance(value, dt.datetime)
    if kind is DetectionKind.TIME:
        return isinstance(value, dt.time)
    if kind is DetectionKind.PRIORITY:
        return isinstance(value, Priority)
    if kind is DetectionKind.CATEGORY:
        return isinstance(value, Category)
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(slots=True, frozen=True)
class Detection:
    """One attribute discovered in an input string.

    ``text`` is the exact substring ``input[start:end]`` that triggered the
    detection.  ``confidence`` is a fixed per-pattern score within ``[0, 1]``;
    it is not a learned probability.
    """

    start: int
    end: int
    text: str
    kind: DetectionKind
    value: DetectionValue
    confidence: float
    source: str

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if self.end <= self.start or self.start < 0:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")
        if len(self.text) != self.end - self.start:
            raise SpanOutOfBoundsError(
                f"text {self.text!r} does not fit span [{self.start}, {self.end})"
            )
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be within [0.0, 1.0]")
        if not _value_matches(self.kind, self.value):
            raise PayloadTypeError(
                f"{self.kind.name} detection cannot carry {type(self.value).__name__}"
            )

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""

        value: object
        if isinstance(self.value, dt.time):
            value = self.value.isoformat(timespec="minutes")
        elif isinstance(self.value, dt.date):
            value = self.value.isoformat()
        elif isinstance(self.value, Priority):
            value = self.value.name
        elif isinstance(self.value, Category):
            value = self.value.value
        else:
            value = self.value
        return {
            "kind": self.kind.value,
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "value": value,
            "confidence": self.confidence,
            "source": self.source,
        }


@runtime_checkable
class Detector(Protocol):
    """Protocol for task attribute detectors.

    A detector analyses input text and returns zero or more
    :class:`Detection` objects.  Detectors are stateless and must not raise
    for any input string.
    """

    def name(self) -> str:
        """Return a short, stable identifier for the detector."""

        ...

    def detect(self, text: str, context: "DetectionContext | None" = None) -> list[Detection]:
        """Detect attributes in ``text``.

        Parameters
        ----------
        text:
            The original text to analyse.
        context:
            Optional :class:`DetectionContext`; supplies the reference date
            used to resolve relative date keywords.
        """

        ...


@dataclass(slots=True, frozen=True)
class DetectionContext:
    """Optional context information supplied to detectors."""

    today: dt.date | None = None


def resolve_today(context: DetectionContext | None) -> dt.date:
    """Return the reference date from ``context`` or the system clock."""

    if context is not None and context.today is not None:
        return context.today
    return dt.date.today()
