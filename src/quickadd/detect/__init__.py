"""Task attribute detectors for free-form quick-add text."""

from .base import (
    Category,
    Detection,
    DetectionContext,
    DetectionKind,
    Detector,
    Priority,
)
from .categories import HashtagCategoryDetector
from .clock_time import ClockTimeDetector
from .dates import DateKeywordDetector
from .duration import DurationDetector
from .priority import PrioritySuffixDetector
from .runner import default_detectors, detect, run_detectors

__all__ = [
    "Category",
    "Detection",
    "DetectionContext",
    "DetectionKind",
    "Detector",
    "Priority",
    "DateKeywordDetector",
    "ClockTimeDetector",
    "PrioritySuffixDetector",
    "HashtagCategoryDetector",
    "DurationDetector",
    "default_detectors",
    "detect",
    "run_detectors",
]
