"""Console presentation of playback state."""

from music_player.infrastructure.console.observer import ConsoleTickObserver

__all__ = ["ConsoleTickObserver"]
