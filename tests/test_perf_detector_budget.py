from __future__ import annotations

import os
import time

import pytest

from quickadd.detect.base import DetectionContext
from quickadd.detect.runner import default_detectors

if os.getenv("SKIP_PERF_TESTS") == "1":
    pytest.skip("Performance tests skipped by SKIP_PERF_TESTS", allow_module_level=True)


def _get_env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip() or default)
    except ValueError:
        return default


def _get_env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, "").strip() or default)
    except ValueError:
        return default


def test_detector_budget() -> None:
    repeat = _get_env_int("PERF_REPEAT", 2000)
    text = " ".join(["water the plants and 9 more things to remember #errand"] * repeat)
    budget = _get_env_float("PERF_MAX_SEC_DET", 0.5)
    context = DetectionContext()

    for det in default_detectors():
        start = time.perf_counter()
        det.detect(text, context)
        elapsed = time.perf_counter() - start
        assert (
            elapsed <= budget
        ), f"{det.__class__.__name__} took {elapsed:.3f}s (budget {budget:.3f}s)"


def test_long_digit_run_stays_linear() -> None:
    budget = _get_env_float("PERF_MAX_SEC_DET", 0.5)
    text = "1" * _get_env_int("PERF_DIGITS", 50_000)
    context = DetectionContext()

    for det in default_detectors():
        start = time.perf_counter()
        assert det.detect(text, context) == []
        elapsed = time.perf_counter() - start
        assert (
            elapsed <= budget
        ), f"{det.__class__.__name__} took {elapsed:.3f}s on digits (budget {budget:.3f}s)"
