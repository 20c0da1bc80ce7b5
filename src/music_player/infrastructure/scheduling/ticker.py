"""Periodic driver for PlaybackSession.on_tick()."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from music_player.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...application.services.playback_session import PlaybackSession

logger = logging.getLogger(__name__)


class PlaybackTicker:
    """Calls ``session.on_tick()`` every *interval_seconds* on the running loop.

    Each tick runs to completion before the next sleep starts, so ticks never
    overlap. The loop ends on :meth:`stop` or once the session is disposed.
    """

    def __init__(self, session: PlaybackSession, *, interval_seconds: float = 1.0) -> None:
        self._session = session
        self._interval_seconds = interval_seconds
        self._running = False
        self._task: asyncio.Task | None = None
        self._tick_count = 0

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.TICKER_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(LogTemplates.TICKER_STARTED, self._interval_seconds)

    async def stop(self) -> None:
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.TICKER_STOPPED)

    async def _run_loop(self) -> None:
        while self._running and not self._session.is_disposed:
            try:
                await asyncio.sleep(self._interval_seconds)
            except asyncio.CancelledError:
                break

            if self._session.is_disposed:
                break
            self.tick()

        self._running = False

    def tick(self) -> None:
        """Run one tick now. Errors are logged, never raised to the loop."""
        try:
            self._session.on_tick()
        except Exception:
            logger.exception("Error during playback tick")
        self._tick_count += 1

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def tick_count(self) -> int:
        return self._tick_count
