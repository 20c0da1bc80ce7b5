"""
Shared Domain Kernel

Contains constrained types, messages and exceptions shared by the music context.
"""

from music_player.domain.shared.exceptions import (
    DomainError,
    EngineUnavailableError,
    IndexOutOfRangeError,
    NoActiveTrackError,
    SessionDisposedError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EngineUnavailableError",
    "NoActiveTrackError",
    "IndexOutOfRangeError",
    "SessionDisposedError",
]
