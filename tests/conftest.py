import itertools
from unittest.mock import MagicMock

import pytest

# ============================================================================
# Clock / Engine Fixtures
# ============================================================================


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Create a fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def simulator_settings():
    """Simulator settings with short, distinct durations per sample source."""
    from music_player.config.settings import SimulatorSettings

    return SimulatorSettings(
        default_duration_ms=180_000,
        durations_ms={"sample_music": 120_000, "sample_music2": 150_000, "sample_music3": 90_000},
    )


@pytest.fixture
def simulated_engine(simulator_settings, clock):
    """Create a simulated audio engine driven by the fake clock."""
    from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

    return SimulatedAudioEngine(simulator_settings, clock=clock)


@pytest.fixture
def mock_engine():
    """Mock AudioEngine minting a fresh handle per acquire."""
    from music_player.application.interfaces.audio_engine import AudioEngine
    from music_player.domain.music.value_objects import EngineHandle

    engine = MagicMock(spec=AudioEngine)
    counter = itertools.count(1)
    engine.acquire.side_effect = lambda source: EngineHandle(value=next(counter), source=source)
    engine.duration.return_value = 180_000
    engine.current_position.return_value = 0
    engine.is_playing.return_value = True
    return engine


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def catalog():
    """The three-track catalog the player ships with."""
    from music_player.domain.music.entities import TrackCatalog

    return TrackCatalog.from_entries(
        [
            {"title": "Track 1", "art_label": "ic_music", "source": "sample_music"},
            {"title": "Track 2", "art_label": "ic_music2", "source": "sample_music2"},
            {"title": "Track 3", "art_label": "ic_music3", "source": "sample_music3"},
        ]
    )


@pytest.fixture
def observer():
    """Mock tick observer."""
    from music_player.application.interfaces.tick_observer import TickObserver

    return MagicMock(spec=TickObserver)


@pytest.fixture
def session(catalog, simulated_engine, observer):
    """Playback session over the simulated engine."""
    from music_player.application.services.playback_session import PlaybackSession

    session = PlaybackSession(catalog=catalog, audio_engine=simulated_engine, observer=observer)
    yield session
    session.dispose()


@pytest.fixture
def mocked_session(catalog, mock_engine, observer):
    """Playback session over a mock engine, for call verification."""
    from music_player.application.services.playback_session import PlaybackSession

    session = PlaybackSession(catalog=catalog, audio_engine=mock_engine, observer=observer)
    yield session
    session.dispose()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    from music_player.config.settings import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()
