"""Result types returned by playback session operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...domain.music.value_objects import TransportStatus
from ...domain.shared.exceptions import (
    DomainError,
    EngineUnavailableError,
    NoActiveTrackError,
    SessionDisposedError,
)

if TYPE_CHECKING:
    from ...domain.music.entities import PlaybackSnapshot


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a transport operation plus the state it left behind."""

    status: TransportStatus
    operation: str
    message: str
    state: PlaybackSnapshot
    error: DomainError | None = None

    @property
    def is_success(self) -> bool:
        return self.status == TransportStatus.SUCCESS

    def raise_for_status(self) -> None:
        """Raise the recorded error for callers that prefer exceptions."""
        if self.error is not None:
            raise self.error

    @classmethod
    def success(cls, operation: str, message: str, state: PlaybackSnapshot) -> TransportResult:
        return cls(
            status=TransportStatus.SUCCESS,
            operation=operation,
            message=message,
            state=state,
        )

    @classmethod
    def engine_unavailable(
        cls, operation: str, error: EngineUnavailableError, state: PlaybackSnapshot
    ) -> TransportResult:
        return cls(
            status=TransportStatus.ENGINE_UNAVAILABLE,
            operation=operation,
            message=error.message,
            state=state,
            error=error,
        )

    @classmethod
    def no_active_track(cls, operation: str, state: PlaybackSnapshot) -> TransportResult:
        error = NoActiveTrackError(operation)
        return cls(
            status=TransportStatus.NO_ACTIVE_TRACK,
            operation=operation,
            message=error.message,
            state=state,
            error=error,
        )

    @classmethod
    def disposed(cls, operation: str, state: PlaybackSnapshot) -> TransportResult:
        error = SessionDisposedError(operation)
        return cls(
            status=TransportStatus.DISPOSED,
            operation=operation,
            message=error.message,
            state=state,
            error=error,
        )
