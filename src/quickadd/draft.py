"""Apply detections to a task draft.

A :class:`TaskDraft` is the structured result of the quick-add input: the
title plus the fields that detections can pre-fill.  Detections are applied
in the order they are given, gated by the configured confidence floors:

* DATE is applied only above ``thresholds.date`` and only while the draft has
  no date yet, so the first accepted date wins for the whole batch.
* TIME, PRIORITY and DURATION above their floors overwrite the field; the
  last accepted one wins.
* CATEGORY above its floor is added to the category set.

Floors are exclusive (``confidence > floor``).  With the default floors a LOW
priority (0.9) and a duration (0.9) are reported but never auto-applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from functools import lru_cache

from .config import load_config
from .config.schema import ThresholdSettings
from .detect import detect
from .detect.base import Category, Detection, DetectionKind, Priority
from .utils.logging import get_logger

__all__ = ["TaskDraft", "apply_detections", "build_draft", "default_thresholds"]

log = get_logger(__name__)


@dataclass(frozen=True)
class TaskDraft:
    """Task fields collected from the input bar before submission."""

    title: str = ""
    priority: Priority = Priority.MEDIUM
    scheduled_date: date | None = None
    scheduled_time: time | None = None
    categories: frozenset[Category] = field(default_factory=frozenset)
    estimated_minutes: int | None = None
    ai_enhanced: bool = False

    def combined_datetime(self) -> datetime | None:
        """Return the scheduled date merged with the scheduled time.

        A draft without a time is scheduled at midnight of its date; a draft
        without a date has no combined value.
        """

        if self.scheduled_date is None:
            return None
        return datetime.combine(self.scheduled_date, self.scheduled_time or time(0, 0))

    def reset(self) -> "TaskDraft":
        """Return an empty draft."""

        return TaskDraft()

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""

        return {
            "title": self.title,
            "priority": self.priority.name,
            "scheduled_date": self.scheduled_date.isoformat() if self.scheduled_date else None,
            "scheduled_time": (
                self.scheduled_time.isoformat(timespec="minutes") if self.scheduled_time else None
            ),
            "categories": sorted(c.value for c in self.categories),
            "estimated_minutes": self.estimated_minutes,
            "ai_enhanced": self.ai_enhanced,
        }


@lru_cache(maxsize=1)
def default_thresholds() -> ThresholdSettings:
    """Return the thresholds from the packaged configuration.

    Only the packaged defaults are read; the environment is ignored.
    """

    return load_config(env={}).thresholds


def apply_detections(
    draft: TaskDraft,
    detections: Iterable[Detection],
    thresholds: ThresholdSettings | None = None,
) -> TaskDraft:
    """Return a copy of ``draft`` with qualifying ``detections`` applied."""

    floors = thresholds if thresholds is not None else default_thresholds()
    updated = draft
    for det in detections:
        if det.kind is DetectionKind.DATE:
            if det.confidence > floors.date and updated.scheduled_date is None:
                updated = replace(updated, scheduled_date=det.value)
                continue
        elif det.kind is DetectionKind.TIME:
            if det.confidence > floors.time:
                updated = replace(updated, scheduled_time=det.value)
                continue
        elif det.kind is DetectionKind.PRIORITY:
            if det.confidence > floors.priority:
                updated = replace(updated, priority=det.value)
                continue
        elif det.kind is DetectionKind.CATEGORY:
            if det.confidence > floors.category:
                updated = replace(updated, categories=updated.categories | {det.value})
                continue
        elif det.kind is DetectionKind.DURATION:
            if det.confidence > floors.duration:
                updated = replace(updated, estimated_minutes=det.value)
                continue
        log.debug("skipped %s %r (confidence %.2f)", det.kind.name, det.text, det.confidence)
    return updated


def build_draft(
    text: str,
    *,
    today: date | None = None,
    thresholds: ThresholdSettings | None = None,
) -> TaskDraft:
    """Detect attributes in ``text`` and apply them to a fresh draft."""

    draft = TaskDraft(title=text.strip())
    return apply_detections(draft, detect(text, today=today), thresholds)
