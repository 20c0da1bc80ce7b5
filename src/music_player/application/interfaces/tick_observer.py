"""Port interface for consumers of playback state updates."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from music_player.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.music.entities import PlaybackSnapshot

logger = logging.getLogger(__name__)


class TickObserver(ABC):
    """Interface for the layer that renders playback state, typically the UI.

    Implementations must return quickly; they run on the session's thread.
    """

    @abstractmethod
    def on_state_changed(self, state: PlaybackSnapshot) -> None:
        """Called after every tick and every state change, disposal included."""
        ...

    def on_tick_error(self, error: Exception) -> None:
        """Called when a tick fails. Tick failures are never raised to the timer."""
        logger.warning(LogTemplates.TICK_FAILED, error)


class NullTickObserver(TickObserver):
    """Observer that ignores state changes."""

    def on_state_changed(self, state: PlaybackSnapshot) -> None:
        return None
