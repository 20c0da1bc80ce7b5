"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class EngineHandle:
    """Opaque token for one acquired audio engine resource.

    Engines mint handles; the session only compares and passes them back.
    """

    value: int
    source: str

    def __str__(self) -> str:
        return f"#{self.value}({self.source})"


class TransportStatus(Enum):
    """Outcome of a transport operation.

    - SUCCESS: the operation took effect
    - ENGINE_UNAVAILABLE: the engine could not acquire the track's source
    - NO_ACTIVE_TRACK: nothing is loaded, the operation was a no-op
    - DISPOSED: the session has been torn down, the operation was a no-op
    """

    SUCCESS = "success"
    ENGINE_UNAVAILABLE = "engine_unavailable"
    NO_ACTIVE_TRACK = "no_active_track"
    DISPOSED = "disposed"

    @property
    def is_recoverable(self) -> bool:
        """Whether the caller can retry after this outcome."""
        return self in (TransportStatus.ENGINE_UNAVAILABLE, TransportStatus.NO_ACTIVE_TRACK)
