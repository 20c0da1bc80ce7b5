#!/usr/bin/env python3
"""Main entry point for the command-line music player."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from music_player.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from music_player.config.container import Container

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-player",
        description="Play the configured track catalog on the simulated audio engine.",
    )
    parser.add_argument(
        "--run-seconds",
        type=float,
        default=10.0,
        help="How long to play before shutting down (default: 10)",
    )
    parser.add_argument(
        "--track",
        type=int,
        default=None,
        help="Track index to start playing (default: PLAYBACK__AUTOPLAY/PRELOAD)",
    )
    return parser


async def run(container: Container, *, run_seconds: float, track_index: int | None = None) -> None:
    """Open the session, tick for *run_seconds*, then shut everything down."""
    try:
        container.open_session(track_index)
        container.ticker.start()
        await asyncio.sleep(run_seconds)
    finally:
        await container.shutdown()


def main(argv: list[str] | None = None) -> int:
    from music_player.config.settings import get_settings

    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING, settings.environment)

    from music_player.config.container import create_container

    container = create_container(settings)

    try:
        asyncio.run(run(container, run_seconds=args.run_seconds, track_index=args.track))
        logger.info(LogTemplates.APP_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.APP_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
