"""Mark detected attributes inside the original text.

Detections from different rules may overlap (``"#work!!"`` holds a category
and a priority side by side; a clock phrase and a duration can share digits).
Markers cannot nest, so :func:`select_non_overlapping` first keeps a single
non‑overlapping set using a greedy, best‑first sweep:

1. Candidates are ranked by ``(-length, -confidence, start, kind)``: longer
   spans win, then the more confident one, then the earlier one.
2. A span is kept only if it does not overlap an already kept span.  Spans
   are half‑open, so spans touching at a boundary do not overlap.

:func:`highlight` then rewrites the text right-to-left so earlier offsets
stay valid while later spans are replaced.
"""

from __future__ import annotations

from collections.abc import Iterable

from .detect.base import Detection
from .utils.textspan import spans_overlap

__all__ = ["select_non_overlapping", "highlight", "DEFAULT_FORMAT"]

DEFAULT_FORMAT = "[{text}]{{{kind}}}"


def _priority_key(det: Detection) -> tuple[int, float, int, str]:
    return (-det.length, -round(det.confidence, 6), det.start, det.kind.name)


def select_non_overlapping(detections: Iterable[Detection]) -> list[Detection]:
    """Return the strongest non‑overlapping detections ordered by ``start``."""

    kept: list[Detection] = []
    for det in sorted(detections, key=_priority_key):
        if any(spans_overlap((det.start, det.end), (k.start, k.end)) for k in kept):
            continue
        kept.append(det)
    return sorted(kept, key=lambda d: d.start)


def highlight(text: str, detections: Iterable[Detection], fmt: str = DEFAULT_FORMAT) -> str:
    """Return ``text`` with each kept detection wrapped using ``fmt``.

    ``fmt`` receives ``text`` (the matched substring) and ``kind`` (the
    lower-case kind name), e.g. ``"<{kind}>{text}</{kind}>"``.
    """

    out = text
    for det in reversed(select_non_overlapping(detections)):
        if det.end > len(text) or text[det.start : det.end] != det.text:
            continue
        marked = fmt.format(text=det.text, kind=det.kind.name.lower())
        out = out[: det.start] + marked + out[det.end :]
    return out
