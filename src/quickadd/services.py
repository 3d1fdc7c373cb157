"""Interfaces of the external collaborators used by an input session.

The AI text service and the voice service live outside this package.  They
are described here as :class:`typing.Protocol` classes so that a
:class:`~quickadd.session.InputSession` can receive concrete implementations
(or test fakes) explicitly instead of reaching for global instances.

Every operation is asynchronous.  Implementations signal failures with the
:class:`~quickadd.utils.errors.ServiceError` hierarchy:

* :class:`~quickadd.utils.errors.AINotConfiguredError` and
  :class:`~quickadd.utils.errors.AIRequestFailedError` for the AI service;
* :class:`~quickadd.utils.errors.PermissionDeniedError` and
  :class:`~quickadd.utils.errors.TranscriptionFailedError` for voice.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from pathlib import Path
from typing import Protocol, runtime_checkable

from .detect.base import Category

__all__ = ["Recording", "ScheduleSuggestion", "AIService", "VoiceService"]


@dataclass(slots=True, frozen=True)
class Recording:
    """A finished audio recording stored on local disk."""

    local_path: Path
    duration_seconds: float = 0.0


@dataclass(slots=True, frozen=True)
class ScheduleSuggestion:
    """Date and time proposed by the AI service for a task."""

    scheduled_date: date
    scheduled_time: time | None = None
    reason: str = ""


@runtime_checkable
class AIService(Protocol):
    """AI text processing for task titles."""

    @property
    def is_configured(self) -> bool: ...

    async def enhance_text(self, text: str) -> str: ...

    async def estimate_minutes(self, text: str) -> int: ...

    async def assess_priority(self, text: str) -> str: ...

    async def summarize(self, text: str) -> str: ...

    async def suggest_schedule(self, text: str) -> ScheduleSuggestion: ...

    async def suggest_categories(self, text: str) -> list[Category]: ...


@runtime_checkable
class VoiceService(Protocol):
    """Microphone recording and speech-to-text."""

    async def start_recording(self) -> Path: ...

    async def stop_recording(self) -> Recording: ...

    async def transcribe(self, audio: Path) -> str: ...

    def cancel_recording(self) -> None: ...

    def delete_recording(self, path: Path) -> None: ...
