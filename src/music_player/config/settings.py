"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import (
    NonNegativeInt,
    ResourceId,
    SimulatedDurationMs,
    TickIntervalSeconds,
    TrackTitleStr,
)


class TrackEntry(BaseModel):
    """One catalog entry as it appears in configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    title: TrackTitleStr
    art_label: ResourceId = Field(validation_alias=AliasChoices("art_label", "art", "album_art"))
    source: ResourceId = Field(validation_alias=AliasChoices("source", "song", "uri"))


def _default_tracks() -> tuple[TrackEntry, ...]:
    return (
        TrackEntry(title="Track 1", art_label="ic_music", source="sample_music"),
        TrackEntry(title="Track 2", art_label="ic_music2", source="sample_music2"),
        TrackEntry(title="Track 3", art_label="ic_music3", source="sample_music3"),
    )


class CatalogSettings(BaseModel):
    """Fixed track catalog configuration."""

    model_config = SettingsConfigDict(frozen=True)

    tracks: tuple[TrackEntry, ...] = Field(default_factory=_default_tracks, min_length=1)

    def as_entries(self) -> list[dict[str, str]]:
        """Plain ``{title, art_label, source}`` mappings, in catalog order."""
        return [track.model_dump() for track in self.tracks]


class PlaybackSettings(BaseModel):
    """Transport and ticker configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    tick_interval_seconds: TickIntervalSeconds = Field(
        default=1.0,
        validation_alias=AliasChoices("tick_interval_seconds", "tick_interval"),
    )
    start_index: NonNegativeInt = 0
    preload: bool = True
    autoplay: bool = False


class SimulatorSettings(BaseModel):
    """Simulated audio engine configuration."""

    model_config = SettingsConfigDict(frozen=True)

    default_duration_ms: SimulatedDurationMs = 180_000
    durations_ms: dict[str, SimulatedDurationMs] = Field(default_factory=dict)
    unavailable_sources: tuple[str, ...] = Field(default_factory=tuple)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - PLAYBACK__TICK_INTERVAL_SECONDS, PLAYBACK__START_INDEX, etc. (nested)
    - CATALOG__TRACKS (JSON array of {title, art_label, source})
    - SIMULATOR__DEFAULT_DURATION_MS, SIMULATOR__DURATIONS_MS (JSON object)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    playback: PlaybackSettings = Field(default_factory=PlaybackSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper

    @model_validator(mode="after")
    def validate_start_index(self) -> Settings:
        """The configured start track must exist in the catalog."""
        count = len(self.catalog.tracks)
        if self.playback.start_index >= count:
            raise ValueError(
                ErrorMessages.START_INDEX_OUT_OF_RANGE.format(
                    index=self.playback.start_index, count=count
                )
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
