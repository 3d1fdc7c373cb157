"""Typed exceptions for detection records, task drafts and input state."""


class SpanError(ValueError):
    """Base class for span related errors."""


class SpanOutOfBoundsError(SpanError):
    """Raised when span coordinates are invalid or out of bounds."""


class PayloadTypeError(TypeError):
    """Raised when a detection value does not match its kind."""


class InvalidTransitionError(ValueError):
    """Raised when the input bar is asked to move between unrelated modes."""

    def __init__(self, source: object, target: object) -> None:
        super().__init__(f"cannot transition from {source} to {target}")
        self.source = source
        self.target = target


class ServiceError(RuntimeError):
    """Base class for failures reported by external collaborators."""


class AINotConfiguredError(ServiceError):
    """Raised when the AI text service has no credentials or endpoint."""


class AIRequestFailedError(ServiceError):
    """Raised when an AI request was sent but did not produce a usable result."""


class VoiceError(ServiceError):
    """Base class for recording and transcription failures."""


class PermissionDeniedError(VoiceError):
    """Raised when microphone access is not granted."""


class TranscriptionFailedError(VoiceError):
    """Raised when a recording could not be turned into text."""
