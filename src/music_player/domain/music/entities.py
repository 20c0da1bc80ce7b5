"""Core domain entities for the music bounded context."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from music_player.domain.shared.exceptions import IndexOutOfRangeError, ValidationError
from music_player.domain.shared.messages import ErrorMessages
from music_player.domain.shared.types import (
    Milliseconds,
    ResourceId,
    TrackIndex,
    TrackTitleStr,
    UnitInterval,
)
from music_player.utils.formatting import format_time


class Track(BaseModel):
    """Immutable value object representing one entry of the catalog."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: TrackIndex
    title: TrackTitleStr
    art_label: ResourceId
    source: ResourceId


class TrackCatalog(BaseModel):
    """Fixed, ordered sequence of tracks available to a session."""

    model_config = ConfigDict(frozen=True, strict=True)

    tracks: tuple[Track, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _ids_are_ordinals(self) -> TrackCatalog:
        for position, track in enumerate(self.tracks):
            if track.id != position:
                raise ValueError(
                    ErrorMessages.TRACK_ID_MISMATCH.format(position=position, track_id=track.id)
                )
        return self

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> TrackCatalog:
        """Build a catalog from ``{title, art_label, source}`` mappings, assigning ids."""
        tracks = tuple(
            Track(
                id=position,
                title=entry["title"],
                art_label=entry["art_label"],
                source=entry["source"],
            )
            for position, entry in enumerate(entries)
        )
        if not tracks:
            raise ValidationError(ErrorMessages.EMPTY_CATALOG, field="tracks")
        return cls(tracks=tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:  # type: ignore[override]
        return iter(self.tracks)

    def __getitem__(self, index: int) -> Track:
        self.check_index(index)
        return self.tracks[index]

    def check_index(self, index: int) -> None:
        """Raise IndexOutOfRangeError unless ``0 <= index < len(self)``."""
        if not 0 <= index < len(self.tracks):
            raise IndexOutOfRangeError(index, len(self.tracks))

    def next_index(self, index: int) -> int:
        """Index after ``index``, wrapping past the last track to the first."""
        return (index + 1) % len(self.tracks)

    def previous_index(self, index: int) -> int:
        """Index before ``index``, wrapping before the first track to the last."""
        return (index - 1 + len(self.tracks)) % len(self.tracks)


class PlaybackSnapshot(BaseModel):
    """Read-only copy of the playback state handed to observers and callers."""

    model_config = ConfigDict(frozen=True, strict=True)

    track_index: TrackIndex
    is_playing: bool
    position_ms: Milliseconds
    duration_ms: Milliseconds
    is_loaded: bool

    @model_validator(mode="after")
    def _position_within_duration(self) -> PlaybackSnapshot:
        if self.position_ms > self.duration_ms:
            raise ValueError(
                ErrorMessages.POSITION_EXCEEDS_DURATION.format(
                    position=self.position_ms, duration=self.duration_ms
                )
            )
        return self

    @property
    def progress(self) -> UnitInterval:
        """Fraction of the track already played, 0.0 when the duration is unknown."""
        if self.duration_ms == 0:
            return 0.0
        return self.position_ms / self.duration_ms

    @property
    def position_formatted(self) -> str:
        return format_time(self.position_ms)

    @property
    def duration_formatted(self) -> str:
        return format_time(self.duration_ms)


class PlaybackState(BaseModel):
    """Mutable playback state, owned exclusively by a PlaybackSession.

    Mutations go through the methods below so that
    ``0 <= position_ms <= duration_ms`` holds after every call.
    """

    model_config = ConfigDict(strict=True)

    track_index: TrackIndex = 0
    is_playing: bool = False
    position_ms: Milliseconds = 0
    duration_ms: Milliseconds = 0
    is_loaded: bool = False

    def clamp_position(self, position_ms: int) -> int:
        """Clamp a position into ``[0, duration_ms]``."""
        return max(0, min(int(position_ms), self.duration_ms))

    def load(self, track_index: int, duration_ms: int, *, playing: bool) -> None:
        """Record that ``track_index`` has been loaded from its beginning."""
        self.track_index = track_index
        self.duration_ms = max(0, int(duration_ms))
        self.position_ms = 0
        self.is_playing = playing
        self.is_loaded = True

    def unload(self) -> None:
        """Record that no engine resource is held. Last position stays visible."""
        self.is_playing = False
        self.is_loaded = False

    def refresh(self, position_ms: int, duration_ms: int) -> None:
        """Apply live engine values, clamping the position to the new duration."""
        self.duration_ms = max(0, int(duration_ms))
        self.position_ms = self.clamp_position(position_ms)

    def seek_to(self, target_ms: int) -> int:
        """Move to ``target_ms`` clamped into range and return the applied value."""
        self.position_ms = self.clamp_position(target_ms)
        return self.position_ms

    def snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(
            track_index=self.track_index,
            is_playing=self.is_playing,
            position_ms=self.position_ms,
            duration_ms=self.duration_ms,
            is_loaded=self.is_loaded,
        )
