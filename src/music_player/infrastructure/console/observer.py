"""Tick observer that renders playback state as log lines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from music_player.application.interfaces.tick_observer import TickObserver
from music_player.utils.formatting import truncate

if TYPE_CHECKING:
    from ...domain.music.entities import PlaybackSnapshot, TrackCatalog

logger = logging.getLogger(__name__)


class ConsoleTickObserver(TickObserver):
    """Writes a ``title  MM:SS / MM:SS  [status]`` line for each state change.

    Identical consecutive lines are suppressed so a paused player stays quiet.
    """

    def __init__(self, catalog: TrackCatalog, *, log: logging.Logger | None = None) -> None:
        self._catalog = catalog
        self._log = log or logger
        self._last_line: str | None = None

    def render(self, state: PlaybackSnapshot) -> str:
        title = truncate(self._catalog.tracks[state.track_index].title)
        if not state.is_loaded:
            status = "stopped"
        elif state.is_playing:
            status = "playing"
        else:
            status = "paused"
        return f"{title}  {state.position_formatted} / {state.duration_formatted}  [{status}]"

    def on_state_changed(self, state: PlaybackSnapshot) -> None:
        line = self.render(state)
        if line == self._last_line:
            return
        self._last_line = line
        self._log.info(line)

    def on_tick_error(self, error: Exception) -> None:
        self._log.error("Playback update failed: %s", error)
