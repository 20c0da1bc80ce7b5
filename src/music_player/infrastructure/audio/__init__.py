"""Audio engine adapters."""

from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

__all__ = ["SimulatedAudioEngine"]
