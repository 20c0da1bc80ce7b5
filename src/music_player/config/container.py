"""Dependency Injection Container

Builds the playback session and its collaborators from settings, lazily and
once. The container also owns shutdown ordering: the ticker stops before the
session releases its engine resource.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.audio_engine import AudioEngine
    from ..application.interfaces.tick_observer import TickObserver
    from ..application.services.playback_session import PlaybackSession
    from ..domain.music.entities import TrackCatalog
    from ..infrastructure.scheduling.ticker import PlaybackTicker
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Collaborators can be
    overridden before first use by passing them to :func:`create_container`.
    """

    settings: Settings

    _catalog: TrackCatalog | None = None
    _audio_engine: AudioEngine | None = None
    _observer: TickObserver | None = None
    _session: PlaybackSession | None = None
    _ticker: PlaybackTicker | None = None

    @property
    def catalog(self) -> TrackCatalog:
        if self._catalog is None:
            from ..domain.music.entities import TrackCatalog

            self._catalog = TrackCatalog.from_entries(self.settings.catalog.as_entries())
        return self._catalog

    @property
    def audio_engine(self) -> AudioEngine:
        if self._audio_engine is None:
            from ..infrastructure.audio.simulated_engine import SimulatedAudioEngine

            self._audio_engine = SimulatedAudioEngine(self.settings.simulator)
        return self._audio_engine

    @property
    def observer(self) -> TickObserver:
        if self._observer is None:
            from ..infrastructure.console.observer import ConsoleTickObserver

            self._observer = ConsoleTickObserver(self.catalog)
        return self._observer

    @property
    def session(self) -> PlaybackSession:
        if self._session is None:
            from ..application.services.playback_session import PlaybackSession

            self._session = PlaybackSession(
                catalog=self.catalog,
                audio_engine=self.audio_engine,
                observer=self.observer,
            )
        return self._session

    @property
    def ticker(self) -> PlaybackTicker:
        if self._ticker is None:
            from ..infrastructure.scheduling.ticker import PlaybackTicker

            self._ticker = PlaybackTicker(
                self.session,
                interval_seconds=self.settings.playback.tick_interval_seconds,
            )
        return self._ticker

    def open_session(self, track_index: int | None = None) -> PlaybackSession:
        """Return the session with its start track loaded.

        An explicit *track_index* is started right away. Otherwise the
        configured ``start_index`` is started when ``autoplay`` is set,
        prepared paused when ``preload`` is set, or left unloaded.
        """
        session = self.session
        playback = self.settings.playback
        if track_index is not None:
            session.start(track_index)
        elif playback.autoplay:
            session.start(playback.start_index)
        elif playback.preload:
            session.prepare(playback.start_index)
        return session

    async def shutdown(self) -> None:
        """Stop the ticker, then dispose the session."""
        if self._ticker is not None:
            await self._ticker.stop()
        if self._session is not None:
            self._session.dispose()
        logger.debug("Container shut down")


def create_container(
    settings: Settings | None = None,
    *,
    audio_engine: AudioEngine | None = None,
    observer: TickObserver | None = None,
) -> Container:
    if settings is None:
        from .settings import get_settings

        settings = get_settings()
    return Container(settings=settings, _audio_engine=audio_engine, _observer=observer)
