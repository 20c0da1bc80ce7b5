"""
Music Bounded Context

Domain logic for the track catalog and playback state.
"""

from music_player.domain.music.entities import (
    PlaybackSnapshot,
    PlaybackState,
    Track,
    TrackCatalog,
)
from music_player.domain.music.value_objects import EngineHandle, TransportStatus

__all__ = [
    # Entities
    "Track",
    "TrackCatalog",
    "PlaybackState",
    "PlaybackSnapshot",
    # Value Objects
    "EngineHandle",
    "TransportStatus",
]
