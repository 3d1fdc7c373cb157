"""Finite-state model of the quick-add input bar.

The input bar is always in exactly one :class:`InputMode`.  Allowed moves are
listed in :data:`TRANSITIONS`; anything else raises
:class:`~quickadd.utils.errors.InvalidTransitionError`.  Moving to the
current mode is a no-op.

::

    COLLAPSED ──▶ FOCUSED ──▶ EXPANDED ──▶ TEMPLATE_PICKER / DATE_PICKER
        │            │  ▲          │
        └──▶ RECORDING ──▶ TRANSCRIBING ──▶ FOCUSED
                     │
                     └──▶ AI_PROCESSING ──▶ FOCUSED / COLLAPSED
"""

from __future__ import annotations

from enum import Enum

from .utils.errors import InvalidTransitionError
from .utils.logging import get_logger

__all__ = ["InputMode", "TRANSITIONS", "InputModeMachine"]

log = get_logger(__name__)


class InputMode(Enum):
    COLLAPSED = "collapsed"
    FOCUSED = "focused"
    EXPANDED = "expanded"
    RECORDING = "recording"
    TRANSCRIBING = "transcribing"
    AI_PROCESSING = "ai_processing"
    TEMPLATE_PICKER = "template_picker"
    DATE_PICKER = "date_picker"


TRANSITIONS: dict[InputMode, frozenset[InputMode]] = {
    InputMode.COLLAPSED: frozenset({InputMode.FOCUSED, InputMode.RECORDING}),
    InputMode.FOCUSED: frozenset(
        {
            InputMode.COLLAPSED,
            InputMode.EXPANDED,
            InputMode.RECORDING,
            InputMode.AI_PROCESSING,
            InputMode.TEMPLATE_PICKER,
            InputMode.DATE_PICKER,
        }
    ),
    InputMode.EXPANDED: frozenset(
        {
            InputMode.COLLAPSED,
            InputMode.FOCUSED,
            InputMode.RECORDING,
            InputMode.AI_PROCESSING,
            InputMode.TEMPLATE_PICKER,
            InputMode.DATE_PICKER,
        }
    ),
    InputMode.RECORDING: frozenset(
        {InputMode.TRANSCRIBING, InputMode.FOCUSED, InputMode.COLLAPSED}
    ),
    InputMode.TRANSCRIBING: frozenset({InputMode.FOCUSED}),
    InputMode.AI_PROCESSING: frozenset({InputMode.FOCUSED, InputMode.COLLAPSED}),
    InputMode.TEMPLATE_PICKER: frozenset({InputMode.FOCUSED, InputMode.EXPANDED}),
    InputMode.DATE_PICKER: frozenset({InputMode.FOCUSED, InputMode.EXPANDED}),
}


class InputModeMachine:
    """Track the input bar mode and enforce :data:`TRANSITIONS`."""

    def __init__(self, initial: InputMode = InputMode.COLLAPSED) -> None:
        self._mode = initial
        self._history: list[InputMode] = [initial]

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def history(self) -> tuple[InputMode, ...]:
        """Modes visited so far, oldest first."""

        return tuple(self._history)

    @property
    def is_busy(self) -> bool:
        """Return ``True`` while voice or AI work owns the input."""

        return self._mode in {
            InputMode.RECORDING,
            InputMode.TRANSCRIBING,
            InputMode.AI_PROCESSING,
        }

    def can_transition(self, target: InputMode) -> bool:
        return target is self._mode or target in TRANSITIONS[self._mode]

    def transition(self, target: InputMode) -> InputMode:
        """Move to ``target`` and return it."""

        if target is self._mode:
            return target
        if target not in TRANSITIONS[self._mode]:
            raise InvalidTransitionError(self._mode, target)
        log.debug("input mode %s -> %s", self._mode.value, target.value)
        self._mode = target
        self._history.append(target)
        return target

    def reset(self) -> None:
        """Return to :attr:`InputMode.COLLAPSED` and clear the history."""

        self._mode = InputMode.COLLAPSED
        self._history = [InputMode.COLLAPSED]
