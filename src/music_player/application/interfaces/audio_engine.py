"""Port interface for the platform audio engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.music.value_objects import EngineHandle


CompletionCallback = Callable[[], None]


class AudioEngine(ABC):
    """Interface for decoding and outputting audio for one source at a time.

    Calls are expected to be synchronous and fast. Positions and durations are
    reported in milliseconds.
    """

    @abstractmethod
    def acquire(self, source: str) -> EngineHandle:
        """Acquire a playback resource bound to *source*.

        Raises:
            EngineUnavailableError: If no resource can be acquired.
        """
        ...

    @abstractmethod
    def start(self, handle: EngineHandle) -> None:
        """Start or resume producing audio."""
        ...

    @abstractmethod
    def pause(self, handle: EngineHandle) -> None:
        """Pause audio output, keeping the position."""
        ...

    @abstractmethod
    def is_playing(self, handle: EngineHandle) -> bool:
        ...

    @abstractmethod
    def current_position(self, handle: EngineHandle) -> int:
        ...

    @abstractmethod
    def duration(self, handle: EngineHandle) -> int:
        """Total length in milliseconds, 0 while unknown."""
        ...

    @abstractmethod
    def seek_to(self, handle: EngineHandle, position_ms: int) -> None:
        ...

    @abstractmethod
    def release(self, handle: EngineHandle) -> None:
        """Free the resource. Releasing an already released handle does nothing."""
        ...

    @abstractmethod
    def set_on_completion(self, handle: EngineHandle, callback: CompletionCallback) -> None:
        """Register *callback* to run when playback reaches the end of the source."""
        ...
