"""Latest-wins debouncing for detection on keystrokes.

Re-running detection on every keystroke is wasteful and lets stale results
overwrite fresh ones.  :class:`Debouncer` waits for a quiet period after the
last :meth:`~Debouncer.submit` and then delivers only the most recent value;
a newer submission cancels the pending one.  At most one delivery is in
flight and it always corresponds to the latest value submitted.

The debouncer runs on the current asyncio event loop.  Detection itself is
synchronous and pure, so cancelling a pending call never needs cleanup.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Generic, TypeVar

from .detect import detect
from .detect.base import Detection
from .utils.logging import get_logger

__all__ = ["Debouncer", "DetectionDebouncer", "DEFAULT_QUIET_PERIOD"]

log = get_logger(__name__)

T = TypeVar("T")

DEFAULT_QUIET_PERIOD = 0.2

Callback = Callable[[T], "Awaitable[None] | None"]


class Debouncer(Generic[T]):
    """Deliver the last submitted value once input has been quiet.

    Attributes:
        quiet_period: Seconds to wait after the last submission.
    """

    def __init__(self, quiet_period: float, callback: Callback[T]) -> None:
        if quiet_period < 0:
            raise ValueError("quiet_period must be non-negative")
        self.quiet_period = quiet_period
        self._callback = callback
        self._task: asyncio.Task[None] | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """Return ``True`` while a delivery is scheduled or running."""

        return self._task is not None and not self._task.done()

    def submit(self, value: T) -> None:
        """Schedule ``value`` for delivery, superseding any pending value."""

        self.cancel()
        self._generation += 1
        self._task = asyncio.get_running_loop().create_task(
            self._deliver_later(value, self._generation)
        )

    def cancel(self) -> None:
        """Drop the pending delivery, if any."""

        if self._task is not None and not self._task.done():
            log.debug("superseded pending delivery %d", self._generation)
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Wait until the pending delivery (if any) has completed.

        Exceptions raised by the callback are re-raised here.
        """

        while self._task is not None and not self._task.done():
            task = self._task
            await asyncio.wait({task})
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()  # type: ignore[misc]

    async def _deliver_later(self, value: T, generation: int) -> None:
        await asyncio.sleep(self.quiet_period)
        if generation != self._generation:
            return
        result = self._callback(value)
        if inspect.isawaitable(result):
            await result


class DetectionDebouncer:
    """Run :func:`~quickadd.detect.detect` on the latest text only.

    ``callback`` receives ``(text, detections)`` for the most recent text
    once typing has paused for ``quiet_period`` seconds.
    """

    def __init__(
        self,
        callback: Callable[[str, list[Detection]], "Awaitable[None] | None"],
        *,
        quiet_period: float = DEFAULT_QUIET_PERIOD,
        today: Callable[[], date | None] | None = None,
    ) -> None:
        self._callback = callback
        self._today = today
        self._debouncer: Debouncer[str] = Debouncer(quiet_period, self._run)

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def submit(self, text: str) -> None:
        self._debouncer.submit(text)

    def cancel(self) -> None:
        self._debouncer.cancel()

    async def flush(self) -> None:
        await self._debouncer.flush()

    def _run(self, text: str) -> "Awaitable[None] | None":
        today = self._today() if self._today is not None else None
        return self._callback(text, detect(text, today=today))
