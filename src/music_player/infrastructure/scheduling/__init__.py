"""Background scheduling for the playback session."""

from music_player.infrastructure.scheduling.ticker import PlaybackTicker

__all__ = ["PlaybackTicker"]
