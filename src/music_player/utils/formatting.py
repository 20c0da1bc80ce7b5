"""Utility functions for formatting playback positions."""

from __future__ import annotations

from functools import lru_cache


def format_time(millis: int | None) -> str:
    """Render milliseconds as ``MM:SS``.

    Minutes are not wrapped at the hour, so 75 minutes renders as ``75:00``.
    Negative or missing values render as ``00:00``.
    """
    if millis is None or millis <= 0:
        return "00:00"

    total_seconds = int(millis) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


@lru_cache(maxsize=256)
def truncate(text: str, max_length: int = 40) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"
