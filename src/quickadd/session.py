"""Quick-add input session.

:class:`InputSession` holds everything the input bar knows between
keystrokes: the raw text, the :class:`~quickadd.draft.TaskDraft` being
pre-filled from detections, the current :class:`~quickadd.input_mode.InputMode`
and the last collaborator error.  The AI and voice services are injected; a
session without them simply reports :class:`~quickadd.utils.errors.ServiceError`
subclasses through :attr:`InputSession.last_error`.

Collaborator failures are recoverable: they are logged, stored in
``last_error`` and the input bar returns to ``FOCUSED``.  They are never
raised out of the session methods.  Illegal mode changes are programming
errors and do raise.  Any other exception from a collaborator propagates,
but the input bar still leaves its busy mode first.

Draft fields accumulate over the life of the session, as they do in the input
bar: once a date has been filled in it is kept until :meth:`submit` or
:meth:`clear`, and categories are only ever added.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import replace
from datetime import date
from typing import TypeVar

from .config import ConfigModel, load_config
from .config.schema import ThresholdSettings
from .debounce import DEFAULT_QUIET_PERIOD, DetectionDebouncer
from .detect import detect
from .detect.base import Detection, Priority
from .draft import TaskDraft, apply_detections, default_thresholds
from .input_mode import InputMode, InputModeMachine
from .services import AIService, VoiceService
from .utils.errors import (
    AINotConfiguredError,
    InvalidTransitionError,
    ServiceError,
    VoiceError,
)
from .utils.logging import get_logger

__all__ = ["InputSession", "priority_from_label"]

log = get_logger(__name__)

R = TypeVar("R")


def priority_from_label(label: str) -> Priority:
    """Map an AI priority label to :class:`Priority`; unknown labels are MEDIUM."""

    cleaned = label.strip().lower()
    if cleaned == "high":
        return Priority.HIGH
    if cleaned == "low":
        return Priority.LOW
    return Priority.MEDIUM


class InputSession:
    """State of one quick-add input bar."""

    def __init__(
        self,
        *,
        ai: AIService | None = None,
        voice: VoiceService | None = None,
        thresholds: ThresholdSettings | None = None,
        today: date | None = None,
        quiet_period: float = DEFAULT_QUIET_PERIOD,
    ) -> None:
        self.ai = ai
        self.voice = voice
        self.thresholds = thresholds if thresholds is not None else default_thresholds()
        self.today = today
        self.quiet_period = quiet_period
        self.machine = InputModeMachine()
        self.text = ""
        self.draft = TaskDraft()
        self.detections: list[Detection] = []
        self.last_error: ServiceError | None = None
        self._debouncer: DetectionDebouncer | None = None

    @classmethod
    def from_config(
        cls,
        cfg: ConfigModel | None = None,
        *,
        ai: AIService | None = None,
        voice: VoiceService | None = None,
    ) -> "InputSession":
        """Build a session using thresholds, quiet period and clock from ``cfg``."""

        cfg = cfg if cfg is not None else load_config()
        return cls(
            ai=ai,
            voice=voice,
            thresholds=cfg.thresholds,
            today=cfg.clock.today,
            quiet_period=cfg.debounce.quiet_period,
        )

    @property
    def mode(self) -> InputMode:
        return self.machine.mode

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip()) and not self.machine.is_busy

    # ------------------------------------------------------------------
    # Text and detection
    # ------------------------------------------------------------------

    def focus(self) -> None:
        if self.mode is InputMode.COLLAPSED:
            self.machine.transition(InputMode.FOCUSED)

    def update_text(self, text: str) -> list[Detection]:
        """Replace the text and apply detections immediately."""

        self.text = text
        self._apply(text, detect(text, today=self.today))
        return self.detections

    def type_text(self, text: str) -> None:
        """Replace the text and apply detections once typing pauses.

        Must be called from a running event loop.  Only the detections for
        the most recent text are ever applied.
        """

        self.text = text
        self.draft = replace(self.draft, title=text.strip())
        if self._debouncer is None:
            self._debouncer = DetectionDebouncer(
                self._apply, quiet_period=self.quiet_period, today=lambda: self.today
            )
        self._debouncer.submit(text)

    async def settle(self) -> None:
        """Wait for a pending debounced detection to be applied."""

        if self._debouncer is not None:
            await self._debouncer.flush()

    def _apply(self, text: str, detections: list[Detection]) -> None:
        if text != self.text:
            log.debug("dropping detections for stale text %r", text)
            return
        self.detections = detections
        self.draft = apply_detections(
            replace(self.draft, title=text.strip()), detections, self.thresholds
        )

    # ------------------------------------------------------------------
    # Voice
    # ------------------------------------------------------------------

    async def start_recording(self) -> bool:
        """Start capturing audio; return ``True`` when recording began."""

        if not self.machine.can_transition(InputMode.RECORDING):
            raise InvalidTransitionError(self.mode, InputMode.RECORDING)
        if self.voice is None:
            self._fail(VoiceError("voice input is not available"))
            return False
        try:
            await self.voice.start_recording()
        except VoiceError as exc:
            self._fail(exc)
            return False
        self.machine.transition(InputMode.RECORDING)
        return True

    async def stop_recording(self) -> str | None:
        """Stop recording, transcribe and append the transcript to the text."""

        if self.voice is None or self.mode is not InputMode.RECORDING:
            return None
        try:
            recording = await self.voice.stop_recording()
            self.machine.transition(InputMode.TRANSCRIBING)
            transcript = await self.voice.transcribe(recording.local_path)
        except VoiceError as exc:
            self._fail(exc)
            return None
        finally:
            self._leave_busy()
        combined = transcript if not self.text else f"{self.text} {transcript}"
        self.update_text(combined)
        self.voice.delete_recording(recording.local_path)
        return transcript

    def cancel_recording(self) -> None:
        if self.voice is not None and self.mode is InputMode.RECORDING:
            self.voice.cancel_recording()
            self.machine.transition(InputMode.FOCUSED)

    # ------------------------------------------------------------------
    # AI actions
    # ------------------------------------------------------------------

    async def enhance(self) -> bool:
        """Replace the text with the AI service's rewrite."""

        enhanced = await self._run_ai(lambda ai: ai.enhance_text(self.text))
        if enhanced is None:
            return False
        self.update_text(enhanced.strip())
        self.draft = replace(self.draft, ai_enhanced=True)
        return True

    async def summarize(self) -> bool:
        summary = await self._run_ai(lambda ai: ai.summarize(self.text))
        if summary is None:
            return False
        self.update_text(summary.strip())
        return True

    async def estimate_time(self) -> bool:
        minutes = await self._run_ai(lambda ai: ai.estimate_minutes(self.text))
        if minutes is None:
            return False
        self.draft = replace(self.draft, estimated_minutes=minutes)
        return True

    async def assess_priority(self) -> bool:
        """Set the draft priority from the AI service's low/medium/high label."""

        label = await self._run_ai(lambda ai: ai.assess_priority(self.text))
        if label is None:
            return False
        self.draft = replace(self.draft, priority=priority_from_label(label))
        return True

    async def auto_tag(self) -> bool:
        categories = await self._run_ai(lambda ai: ai.suggest_categories(self.text))
        if categories is None:
            return False
        self.draft = replace(self.draft, categories=self.draft.categories | set(categories))
        return True

    async def smart_schedule(self) -> bool:
        suggestion = await self._run_ai(lambda ai: ai.suggest_schedule(self.text))
        if suggestion is None:
            return False
        self.draft = replace(
            self.draft,
            scheduled_date=suggestion.scheduled_date,
            scheduled_time=suggestion.scheduled_time,
        )
        return True

    async def _run_ai(self, call: Callable[[AIService], Awaitable[R]]) -> R | None:
        if not self.text.strip():
            return None
        if self.ai is None or not self.ai.is_configured:
            self._fail(AINotConfiguredError("AI service is not configured"))
            return None
        self.focus()
        self.machine.transition(InputMode.AI_PROCESSING)
        try:
            result = await call(self.ai)
        except ServiceError as exc:
            self._fail(exc)
            return None
        finally:
            self._leave_busy()
        return result

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self) -> TaskDraft | None:
        """Return the finished draft and clear the session.

        Blank text, or a session busy with voice or AI work, yields ``None``
        and leaves the session untouched.
        """

        if not self.can_submit:
            return None
        finished = replace(self.draft, title=self.text.strip())
        self.clear()
        return finished

    def clear(self) -> None:
        if self._debouncer is not None:
            self._debouncer.cancel()
        self.text = ""
        self.draft = TaskDraft()
        self.detections = []

    def _fail(self, exc: ServiceError) -> None:
        log.warning("%s: %s", type(exc).__name__, exc)
        self.last_error = exc
        if self.machine.can_transition(InputMode.FOCUSED) and self.mode is not InputMode.COLLAPSED:
            self.machine.transition(InputMode.FOCUSED)

    def _leave_busy(self) -> None:
        if self.machine.is_busy:
            self.machine.transition(InputMode.FOCUSED)
