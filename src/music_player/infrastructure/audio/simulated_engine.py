"""
Simulated Audio Engine

In-memory AudioEngine that keeps a virtual playhead on a monotonic clock.
Used by the command-line player and by tests; no audio is decoded.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from music_player.application.interfaces.audio_engine import AudioEngine, CompletionCallback
from music_player.config.settings import SimulatorSettings
from music_player.domain.music.value_objects import EngineHandle
from music_player.domain.shared.exceptions import EngineUnavailableError
from music_player.domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)


@dataclass
class _SimulatedPlayer:
    """Playhead bookkeeping for one acquired handle."""

    handle: EngineHandle
    duration_ms: int
    offset_ms: int = 0
    started_at: float | None = None
    on_completion: CompletionCallback | None = None
    timer: asyncio.TimerHandle | None = None


class SimulatedAudioEngine(AudioEngine):
    """AudioEngine whose tracks play silently in real (or injected) time.

    When an asyncio loop is running, reaching the end of a track fires the
    completion callback through ``loop.call_later``. Without a loop, tests
    drive completion explicitly with :meth:`complete`.
    """

    def __init__(
        self,
        settings: SimulatorSettings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings or SimulatorSettings()
        self._clock = clock
        self._players: dict[int, _SimulatedPlayer] = {}
        self._handle_ids = itertools.count(1)
        self._unavailable: set[str] = set(self._settings.unavailable_sources)

    @property
    def active_handles(self) -> list[EngineHandle]:
        return [player.handle for player in self._players.values()]

    def fail_source(self, source: str) -> None:
        """Make future acquisitions of *source* raise EngineUnavailableError."""
        self._unavailable.add(source)

    def restore_source(self, source: str) -> None:
        self._unavailable.discard(source)

    # ── AudioEngine ───────────────────────────────────────────────────

    def acquire(self, source: str) -> EngineHandle:
        if source in self._unavailable:
            raise EngineUnavailableError(
                source, ErrorMessages.SIMULATED_ACQUIRE_FAILURE.format(source=source)
            )

        handle = EngineHandle(value=next(self._handle_ids), source=source)
        duration_ms = self._settings.durations_ms.get(source, self._settings.default_duration_ms)
        self._players[handle.value] = _SimulatedPlayer(handle=handle, duration_ms=duration_ms)
        return handle

    def start(self, handle: EngineHandle) -> None:
        player = self._get(handle)
        if player.started_at is not None:
            return
        if player.offset_ms >= player.duration_ms:
            player.offset_ms = 0
        player.started_at = self._clock()
        self._schedule_completion(player)

    def pause(self, handle: EngineHandle) -> None:
        player = self._get(handle)
        player.offset_ms = self._position(player)
        player.started_at = None
        self._cancel_timer(player)

    def is_playing(self, handle: EngineHandle) -> bool:
        player = self._get(handle)
        return player.started_at is not None and self._position(player) < player.duration_ms

    def current_position(self, handle: EngineHandle) -> int:
        return self._position(self._get(handle))

    def duration(self, handle: EngineHandle) -> int:
        return self._get(handle).duration_ms

    def seek_to(self, handle: EngineHandle, position_ms: int) -> None:
        player = self._get(handle)
        player.offset_ms = max(0, min(int(position_ms), player.duration_ms))
        if player.started_at is not None:
            player.started_at = self._clock()
            self._schedule_completion(player)

    def release(self, handle: EngineHandle) -> None:
        player = self._players.get(handle.value)
        if player is None or player.handle != handle:
            return
        self._cancel_timer(player)
        del self._players[handle.value]

    def set_on_completion(self, handle: EngineHandle, callback: CompletionCallback) -> None:
        self._get(handle).on_completion = callback

    # ── Simulation controls ───────────────────────────────────────────

    def complete(self, handle: EngineHandle) -> None:
        """Jump to the end of *handle*'s track and fire its completion callback."""
        player = self._players.get(handle.value)
        if player is None or player.handle != handle:
            return

        self._cancel_timer(player)
        player.offset_ms = player.duration_ms
        player.started_at = None
        if player.on_completion is not None:
            player.on_completion()

    # ── Internals ─────────────────────────────────────────────────────

    def _get(self, handle: EngineHandle) -> _SimulatedPlayer:
        player = self._players.get(handle.value)
        if player is None or player.handle != handle:
            raise ValueError(ErrorMessages.UNKNOWN_HANDLE.format(handle=handle))
        return player

    def _position(self, player: _SimulatedPlayer) -> int:
        if player.started_at is None:
            return player.offset_ms
        elapsed_ms = int((self._clock() - player.started_at) * 1000)
        return min(player.duration_ms, player.offset_ms + elapsed_ms)

    def _schedule_completion(self, player: _SimulatedPlayer) -> None:
        self._cancel_timer(player)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return

        remaining_s = max(0, player.duration_ms - self._position(player)) / 1000
        player.timer = loop.call_later(remaining_s, self._fire_completion, player.handle)

    def _fire_completion(self, handle: EngineHandle) -> None:
        try:
            self.complete(handle)
        except Exception:
            logger.exception("Error in completion callback for %s", handle)

    @staticmethod
    def _cancel_timer(player: _SimulatedPlayer) -> None:
        if player.timer is not None:
            player.timer.cancel()
            player.timer = None
