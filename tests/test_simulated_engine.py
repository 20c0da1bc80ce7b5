"""
Tests for SimulatedAudioEngine

Covers acquisition, the virtual playhead, completion callbacks and
handle lifecycle.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from music_player.domain.shared.exceptions import EngineUnavailableError


class TestAcquire:
    """Tests for resource acquisition."""

    def test_acquire_mints_distinct_handles(self, simulated_engine):
        first = simulated_engine.acquire("sample_music")
        second = simulated_engine.acquire("sample_music")

        assert first != second
        assert first.source == "sample_music"
        assert simulated_engine.active_handles == [first, second]

    def test_duration_from_settings(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music3")

        assert simulated_engine.duration(handle) == 90_000

    def test_duration_defaults(self, simulated_engine):
        handle = simulated_engine.acquire("unknown_source")

        assert simulated_engine.duration(handle) == 180_000

    def test_failed_source_raises(self, simulated_engine):
        simulated_engine.fail_source("sample_music")

        with pytest.raises(EngineUnavailableError, match="refused source 'sample_music'"):
            simulated_engine.acquire("sample_music")

    def test_unavailable_sources_from_settings(self):
        from music_player.config.settings import SimulatorSettings
        from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

        engine = SimulatedAudioEngine(SimulatorSettings(unavailable_sources=("broken",)))

        with pytest.raises(EngineUnavailableError):
            engine.acquire("broken")

    def test_restore_source(self, simulated_engine):
        simulated_engine.fail_source("sample_music")
        simulated_engine.restore_source("sample_music")

        assert simulated_engine.acquire("sample_music").source == "sample_music"


class TestPlayhead:
    """Tests for position tracking."""

    def test_new_handle_is_idle(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music")

        assert simulated_engine.is_playing(handle) is False
        assert simulated_engine.current_position(handle) == 0

    def test_position_advances_with_clock(self, simulated_engine, clock):
        handle = simulated_engine.acquire("sample_music")
        simulated_engine.start(handle)

        clock.advance(2.5)

        assert simulated_engine.is_playing(handle) is True
        assert simulated_engine.current_position(handle) == 2_500

    def test_pause_freezes_position(self, simulated_engine, clock):
        handle = simulated_engine.acquire("sample_music")
        simulated_engine.start(handle)
        clock.advance(3)

        simulated_engine.pause(handle)
        clock.advance(10)

        assert simulated_engine.is_playing(handle) is False
        assert simulated_engine.current_position(handle) == 3_000

    def test_start_twice_does_not_reset(self, simulated_engine, clock):
        handle = simulated_engine.acquire("sample_music")
        simulated_engine.start(handle)
        clock.advance(4)

        simulated_engine.start(handle)

        assert simulated_engine.current_position(handle) == 4_000

    def test_position_capped_at_duration(self, simulated_engine, clock):
        handle = simulated_engine.acquire("sample_music3")
        simulated_engine.start(handle)

        clock.advance(500)

        assert simulated_engine.current_position(handle) == 90_000
        assert simulated_engine.is_playing(handle) is False

    @pytest.mark.parametrize(("target", "expected"), [(-10, 0), (10_000, 10_000), (10**9, 90_000)])
    def test_seek_clamps(self, simulated_engine, target, expected):
        handle = simulated_engine.acquire("sample_music3")

        simulated_engine.seek_to(handle, target)

        assert simulated_engine.current_position(handle) == expected

    def test_start_after_end_restarts(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music3")
        simulated_engine.seek_to(handle, 90_000)

        simulated_engine.start(handle)

        assert simulated_engine.current_position(handle) == 0


class TestCompletionAndRelease:
    """Tests for completion callbacks and release."""

    def test_complete_fires_callback(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music")
        callback = MagicMock()
        simulated_engine.set_on_completion(handle, callback)
        simulated_engine.start(handle)

        simulated_engine.complete(handle)

        callback.assert_called_once_with()
        assert simulated_engine.current_position(handle) == 120_000

    def test_release_is_idempotent(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music")

        simulated_engine.release(handle)
        simulated_engine.release(handle)

        assert simulated_engine.active_handles == []

    def test_released_handle_is_unusable(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music")
        simulated_engine.release(handle)

        with pytest.raises(ValueError, match="Unknown or released engine handle"):
            simulated_engine.start(handle)

    def test_complete_after_release_is_ignored(self, simulated_engine):
        handle = simulated_engine.acquire("sample_music")
        callback = MagicMock()
        simulated_engine.set_on_completion(handle, callback)
        simulated_engine.release(handle)

        simulated_engine.complete(handle)

        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_completion_scheduled_on_running_loop(self):
        from music_player.config.settings import SimulatorSettings
        from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

        engine = SimulatedAudioEngine(SimulatorSettings(default_duration_ms=20))
        handle = engine.acquire("short")
        callback = MagicMock()
        engine.set_on_completion(handle, callback)

        engine.start(handle)
        await asyncio.sleep(0.15)

        callback.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_pause_cancels_scheduled_completion(self):
        from music_player.config.settings import SimulatorSettings
        from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

        engine = SimulatedAudioEngine(SimulatorSettings(default_duration_ms=50))
        handle = engine.acquire("short")
        callback = MagicMock()
        engine.set_on_completion(handle, callback)

        engine.start(handle)
        engine.pause(handle)
        await asyncio.sleep(0.15)

        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_scheduled_callback_error_is_logged(self, caplog):
        from music_player.config.settings import SimulatorSettings
        from music_player.infrastructure.audio.simulated_engine import SimulatedAudioEngine

        engine = SimulatedAudioEngine(SimulatorSettings(default_duration_ms=10))
        handle = engine.acquire("short")
        engine.set_on_completion(handle, MagicMock(side_effect=RuntimeError("boom")))

        engine.start(handle)
        await asyncio.sleep(0.1)

        assert "Error in completion callback" in caplog.text
