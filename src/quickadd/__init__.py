"""quickadd: heuristic task attribute detection for quick-add text input.

The package scans free-form task text for relative dates, clock times,
exclamation-mark priorities, hashtag categories and durations, and applies
the confident ones to a task draft.

>>> from datetime import date
>>> [d.kind.name for d in detect("call mom today", today=date(2024, 1, 1))]
['DATE']
"""

from .detect import Category, Detection, DetectionKind, Priority, detect
from .draft import TaskDraft, apply_detections, build_draft

__version__ = "0.1.0"

__all__ = [
    "Category",
    "Detection",
    "DetectionKind",
    "Priority",
    "TaskDraft",
    "apply_detections",
    "build_draft",
    "detect",
    "__version__",
]
