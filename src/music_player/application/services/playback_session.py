"""Playback Session - the state machine behind the transport controls."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from ...domain.music.entities import PlaybackSnapshot, PlaybackState
from ...domain.shared.exceptions import EngineUnavailableError
from ...domain.shared.messages import LogTemplates
from ..interfaces.tick_observer import NullTickObserver
from .session_models import TransportResult

if TYPE_CHECKING:
    from types import TracebackType

    from ...domain.music.entities import Track, TrackCatalog
    from ...domain.music.value_objects import EngineHandle
    from ..interfaces.audio_engine import AudioEngine
    from ..interfaces.tick_observer import TickObserver

logger = logging.getLogger(__name__)


class PlaybackSession:
    """Sole owner of playback state for one catalog and one audio engine.

    The session holds at most one engine handle at a time and releases it
    before acquiring the next. Methods are not thread-safe; callers serialize
    access (normally by running everything on one event loop).
    """

    def __init__(
        self,
        *,
        catalog: TrackCatalog,
        audio_engine: AudioEngine,
        observer: TickObserver | None = None,
    ) -> None:
        self._catalog = catalog
        self._engine = audio_engine
        self._observer = observer or NullTickObserver()

        self._state = PlaybackState()
        self._handle: EngineHandle | None = None
        self._disposed = False

        logger.info(LogTemplates.SESSION_CREATED, len(catalog))

    def __enter__(self) -> PlaybackSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    @property
    def catalog(self) -> TrackCatalog:
        return self._catalog

    @property
    def track_count(self) -> int:
        return len(self._catalog)

    @property
    def state(self) -> PlaybackSnapshot:
        return self._state.snapshot()

    @property
    def current_track(self) -> Track:
        return self._catalog[self._state.track_index]

    @property
    def has_active_track(self) -> bool:
        return self._handle is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ── Transport ─────────────────────────────────────────────────────

    def start(self, track_index: int) -> TransportResult:
        """Load *track_index* and start playing it from the beginning.

        Raises:
            IndexOutOfRangeError: If *track_index* is outside the catalog.
        """
        return self._load(track_index, play=True, operation="start")

    def prepare(self, track_index: int = 0) -> TransportResult:
        """Load *track_index* paused, so the next toggle starts it."""
        return self._load(track_index, play=False, operation="prepare")

    def next(self) -> TransportResult:
        if self._disposed:
            return self._disposed_result("next")
        return self.start(self._catalog.next_index(self._state.track_index))

    def previous(self) -> TransportResult:
        if self._disposed:
            return self._disposed_result("previous")
        return self.start(self._catalog.previous_index(self._state.track_index))

    def toggle_play_pause(self) -> TransportResult:
        operation = "toggle_play_pause"
        if self._disposed:
            return self._disposed_result(operation)
        handle = self._handle
        if handle is None:
            logger.debug(LogTemplates.NO_ACTIVE_TRACK, operation)
            return TransportResult.no_active_track(operation, self.state)

        if self._engine.is_playing(handle):
            self._engine.pause(handle)
            self._state.refresh(
                self._engine.current_position(handle), self._engine.duration(handle)
            )
            self._state.is_playing = False
            logger.debug(
                LogTemplates.PLAYBACK_PAUSED, self._state.track_index, self._state.position_ms
            )
            message = f"Paused: {self.current_track.title}"
        else:
            self._engine.start(handle)
            self._state.is_playing = True
            logger.debug(
                LogTemplates.PLAYBACK_RESUMED, self._state.track_index, self._state.position_ms
            )
            message = f"Playing: {self.current_track.title}"

        self._notify()
        return TransportResult.success(operation, message, self.state)

    def seek(self, target_ms: int) -> TransportResult:
        """Move to *target_ms*, clamped into ``[0, duration_ms]``."""
        operation = "seek"
        if self._disposed:
            return self._disposed_result(operation)
        handle = self._handle
        if handle is None:
            logger.debug(LogTemplates.NO_ACTIVE_TRACK, operation)
            return TransportResult.no_active_track(operation, self.state)

        applied = self._state.seek_to(target_ms)
        self._engine.seek_to(handle, applied)
        logger.debug(LogTemplates.PLAYBACK_SEEKED, self._state.track_index, applied, target_ms)

        self._notify()
        snapshot = self.state
        return TransportResult.success(operation, f"Seeked to {snapshot.position_formatted}", snapshot)

    def on_tick(self) -> None:
        """Refresh position and duration from the engine while playing.

        Never raises: engine failures are handed to the observer's error channel.
        """
        if self._disposed or self._handle is None or not self._state.is_playing:
            return

        handle = self._handle
        try:
            position_ms = self._engine.current_position(handle)
            duration_ms = self._engine.duration(handle)
        except Exception as e:
            self._report_tick_error(e)
            return

        self._state.refresh(position_ms, duration_ms)
        self._notify()

    def dispose(self) -> None:
        """Release the engine resource. Safe to call repeatedly.

        The observer receives one final unloaded snapshot.
        """
        if self._disposed:
            return

        self._disposed = True
        self._release_handle()
        self._state.unload()
        self._notify()
        logger.info(LogTemplates.SESSION_DISPOSED)

    # ── Internals ─────────────────────────────────────────────────────

    def _load(self, track_index: int, *, play: bool, operation: str) -> TransportResult:
        if self._disposed:
            return self._disposed_result(operation)
        track = self._catalog[track_index]

        self._release_handle()
        try:
            handle = self._engine.acquire(track.source)
        except EngineUnavailableError as e:
            logger.warning(LogTemplates.ENGINE_UNAVAILABLE, track_index, e.message)
            self._state.unload()
            self._notify()
            return TransportResult.engine_unavailable(operation, e, self.state)

        self._handle = handle
        logger.debug(LogTemplates.ENGINE_ACQUIRED, handle, track.source)
        try:
            self._engine.set_on_completion(handle, partial(self._on_completion, handle))
            if play:
                self._engine.start(handle)
            duration_ms = self._engine.duration(handle)
        except Exception:
            # Don't leak a half-started handle.
            self._release_handle()
            self._state.unload()
            raise

        self._state.load(track_index, duration_ms, playing=play)
        if play:
            logger.info(LogTemplates.TRACK_STARTED, track_index, track.title, duration_ms)
            message = f"Now playing: {track.title}"
        else:
            logger.info(LogTemplates.TRACK_PREPARED, track_index, track.title, duration_ms)
            message = f"Ready: {track.title}"

        self._notify()
        return TransportResult.success(operation, message, self.state)

    def _on_completion(self, handle: EngineHandle) -> None:
        if self._disposed or handle != self._handle:
            logger.debug(LogTemplates.STALE_COMPLETION_IGNORED, handle)
            return

        logger.info(LogTemplates.TRACK_COMPLETED, self._state.track_index)
        self.next()

    def _release_handle(self) -> None:
        handle, self._handle = self._handle, None
        if handle is None:
            return
        self._engine.release(handle)
        logger.debug(LogTemplates.ENGINE_RELEASED, handle)

    def _disposed_result(self, operation: str) -> TransportResult:
        logger.debug(LogTemplates.SESSION_ALREADY_DISPOSED, operation)
        return TransportResult.disposed(operation, self.state)

    def _notify(self) -> None:
        try:
            self._observer.on_state_changed(self.state)
        except Exception:
            logger.exception(LogTemplates.OBSERVER_FAILED)

    def _report_tick_error(self, error: Exception) -> None:
        try:
            self._observer.on_tick_error(error)
        except Exception:
            logger.exception(LogTemplates.OBSERVER_FAILED)
