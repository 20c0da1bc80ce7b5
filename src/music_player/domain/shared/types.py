"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types shared by the music models and the settings live here once,
so models can simply annotate their fields::

    from music_player.domain.shared.types import Milliseconds, TrackTitleStr

    class MyModel(BaseModel):
        position_ms: Milliseconds
        title: TrackTitleStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

Milliseconds = Annotated[int, Field(ge=0)]
"""A playback position or duration in milliseconds."""

TrackIndex = Annotated[int, Field(ge=0)]
"""Zero-based position of a track in the catalog."""

UnitInterval = Annotated[float, Field(ge=0.0, le=1.0)]
"""Float in [0.0, 1.0], used for playback progress."""


# ── String constraints ──────────────────────────────────────────────

TrackTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""

ResourceId = Annotated[str, Field(min_length=1, max_length=1024)]
"""Opaque resource identifier (artwork label or audio source)."""


# ── Settings-specific constraints ──────────────────────────────────

TickIntervalSeconds = Annotated[float, Field(gt=0.0, le=60.0)]
"""Cadence of the playback ticker: (0, 60] seconds."""

SimulatedDurationMs = Annotated[int, Field(ge=0, le=86_400_000)]
"""Simulated track length: 0 … 24 hours."""
