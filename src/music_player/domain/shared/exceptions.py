"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EngineUnavailableError(DomainError):
    """Raised by an audio engine that cannot acquire a playback resource."""

    def __init__(self, source: str, message: str | None = None) -> None:
        msg = message or f"Audio engine could not acquire source '{source}'"
        super().__init__(msg, code="ENGINE_UNAVAILABLE")
        self.source = source


class NoActiveTrackError(DomainError):
    """Raised when a transport operation needs a loaded track and none is."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        msg = message or f"Cannot perform '{operation}': no track is loaded"
        super().__init__(msg, code="NO_ACTIVE_TRACK")
        self.operation = operation


class IndexOutOfRangeError(DomainError, IndexError):
    """Raised when a track index outside the catalog is requested directly."""

    def __init__(self, index: int, track_count: int) -> None:
        msg = f"Track index {index} is outside [0, {track_count})"
        super().__init__(msg, code="INDEX_OUT_OF_RANGE")
        self.index = index
        self.track_count = track_count


class SessionDisposedError(DomainError):
    """Raised when a disposed session is asked to do work."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        msg = message or f"Cannot perform '{operation}': session has been disposed"
        super().__init__(msg, code="SESSION_DISPOSED")
        self.operation = operation
