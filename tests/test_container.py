"""
Unit Tests for Dependency Injection Container

Tests for:
- Lazy initialization (properties create instances on first access)
- Caching (subsequent property access returns same instance)
- Collaborator overrides through create_container
- open_session honouring the preload/autoplay settings
- Shutdown ordering (ticker stopped, then session disposed)
"""

from unittest.mock import MagicMock, patch

import pytest

from music_player.application.interfaces.tick_observer import TickObserver
from music_player.application.services.playback_session import PlaybackSession
from music_player.config.container import Container, create_container
from music_player.config.settings import PlaybackSettings, Settings
from music_player.domain.music.entities import TrackCatalog
from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine
from music_player.infrastructure.console.observer import ConsoleTickObserver
from music_player.infrastructure.scheduling.ticker import PlaybackTicker


def _settings(**playback) -> Settings:
    return Settings(_env_file=None, playback=PlaybackSettings(**playback))


@pytest.fixture
def container():
    """Container over default settings and a mock observer."""
    container = create_container(_settings(), observer=MagicMock(spec=TickObserver))
    yield container
    if container._session is not None:
        container._session.dispose()


class TestContainerInitialization:
    """Tests for container construction."""

    def test_components_start_unset(self):
        container = Container(settings=_settings())

        assert container._catalog is None
        assert container._audio_engine is None
        assert container._observer is None
        assert container._session is None
        assert container._ticker is None

    def test_create_container_uses_cached_settings(self):
        settings = _settings()

        with patch("music_player.config.settings.get_settings", return_value=settings):
            container = create_container()

        assert container.settings is settings

    def test_create_container_accepts_overrides(self, mock_engine, observer):
        container = create_container(_settings(), audio_engine=mock_engine, observer=observer)

        assert container.audio_engine is mock_engine
        assert container.observer is observer


class TestLazyProperties:
    """Tests for lazily built, cached collaborators."""

    def test_catalog_built_from_settings(self, container):
        catalog = container.catalog

        assert isinstance(catalog, TrackCatalog)
        assert [track.title for track in catalog] == ["Track 1", "Track 2", "Track 3"]
        assert container.catalog is catalog

    def test_default_audio_engine_is_simulated(self):
        container = Container(settings=_settings())

        assert isinstance(container.audio_engine, SimulatedAudioEngine)
        assert container.audio_engine is container.audio_engine

    def test_default_observer_is_console(self):
        container = Container(settings=_settings())

        assert isinstance(container.observer, ConsoleTickObserver)

    def test_session_wires_collaborators(self, container):
        session = container.session

        assert isinstance(session, PlaybackSession)
        assert session.catalog is container.catalog
        assert container.session is session

    def test_ticker_uses_configured_interval(self):
        container = Container(settings=_settings(tick_interval_seconds=0.5))

        ticker = container.ticker

        assert isinstance(ticker, PlaybackTicker)
        assert ticker._interval_seconds == 0.5
        container.session.dispose()


class TestOpenSession:
    """Tests for loading the configured start track."""

    def test_explicit_track_overrides_preload(self, mock_engine):
        container = create_container(
            _settings(start_index=1), audio_engine=mock_engine, observer=MagicMock(spec=TickObserver)
        )

        session = container.open_session(2)

        mock_engine.acquire.assert_called_once_with("sample_music3")
        assert session.state.track_index == 2
        assert session.state.is_playing is True
        session.dispose()

    def test_preload_prepares_start_track(self):
        container = create_container(_settings(start_index=1), observer=MagicMock(spec=TickObserver))

        session = container.open_session()

        assert session.has_active_track
        assert session.state.track_index == 1
        assert session.state.is_playing is False
        session.dispose()

    def test_autoplay_starts_start_track(self):
        container = create_container(
            _settings(start_index=2, autoplay=True), observer=MagicMock(spec=TickObserver)
        )

        session = container.open_session()

        assert session.state.track_index == 2
        assert session.state.is_playing is True
        session.dispose()

    def test_no_preload_leaves_session_empty(self):
        container = create_container(_settings(preload=False), observer=MagicMock(spec=TickObserver))

        session = container.open_session()

        assert not session.has_active_track
        session.dispose()


class TestShutdown:
    """Tests for container shutdown."""

    @pytest.mark.asyncio
    async def test_shutdown_stops_ticker_and_disposes_session(self, container):
        session = container.open_session()
        container.ticker.start()

        await container.shutdown()

        assert container.ticker.is_running is False
        assert session.is_disposed
        assert container.audio_engine.active_handles == []

    @pytest.mark.asyncio
    async def test_shutdown_without_components_is_noop(self):
        container = Container(settings=_settings())

        await container.shutdown()

        assert container._session is None
        assert container._ticker is None
