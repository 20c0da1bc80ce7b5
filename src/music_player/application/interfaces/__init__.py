"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the playback session
and the collaborators it drives. These are the "ports" in
hexagonal architecture.
"""

from music_player.application.interfaces.audio_engine import AudioEngine, CompletionCallback
from music_player.application.interfaces.tick_observer import NullTickObserver, TickObserver

__all__ = [
    "AudioEngine",
    "CompletionCallback",
    "TickObserver",
    "NullTickObserver",
]
