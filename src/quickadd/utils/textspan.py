"""Utility functions for working with text spans.

The helpers in this module are pure and framework agnostic.  Spans are
represented as half‑open intervals ``[start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  Boundary touching spans therefore do not overlap.
"""

from __future__ import annotations

__all__ = ["spans_overlap", "rtrim_whitespace"]


def spans_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Return ``True`` if span ``a`` overlaps span ``b``."""

    return not (a[1] <= b[0] or b[1] <= a[0])


def rtrim_whitespace(text: str, start: int, end: int) -> int:
    """Return ``end`` moved left past trailing whitespace, never below ``start + 1``."""

    while end - 1 > start and text[end - 1].isspace():
        end -= 1
    return end
