"""Centralized message constants for error messages, validation, and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Catalog Validation Errors
    EMPTY_CATALOG = "Track catalog cannot be empty"
    TRACK_ID_MISMATCH = "Track at position {position} has id {track_id}"

    # Playback State Errors
    POSITION_EXCEEDS_DURATION = "position_ms ({position}) exceeds duration_ms ({duration})"

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    START_INDEX_OUT_OF_RANGE = "playback.start_index {index} is outside the catalog of {count} tracks"

    # Engine Errors
    UNKNOWN_HANDLE = "Unknown or released engine handle: {handle}"
    SIMULATED_ACQUIRE_FAILURE = "Simulated engine refused source '{source}'"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Session Lifecycle
    SESSION_CREATED = "Playback session created with %d tracks"
    SESSION_DISPOSED = "Playback session disposed"
    SESSION_ALREADY_DISPOSED = "Playback session already disposed, ignoring %s"

    # Transport Operations
    TRACK_STARTED = "Started track %d '%s' (duration %d ms)"
    TRACK_PREPARED = "Prepared track %d '%s' (duration %d ms)"
    PLAYBACK_PAUSED = "Paused track %d at %d ms"
    PLAYBACK_RESUMED = "Resumed track %d at %d ms"
    PLAYBACK_SEEKED = "Seeked track %d to %d ms (requested %d ms)"
    NO_ACTIVE_TRACK = "Ignoring %s: no track is loaded"
    TRACK_COMPLETED = "Track %d completed, advancing"
    STALE_COMPLETION_IGNORED = "Ignoring completion from stale handle %s"

    # Engine Operations
    ENGINE_UNAVAILABLE = "Audio engine unavailable for track %d: %s"
    ENGINE_RELEASED = "Released engine handle %s"
    ENGINE_ACQUIRED = "Acquired engine handle %s for source '%s'"

    # Ticker
    TICKER_STARTED = "Playback ticker started (interval %.2fs)"
    TICKER_STOPPED = "Playback ticker stopped"
    TICKER_ALREADY_RUNNING = "Playback ticker is already running"
    TICK_FAILED = "Playback tick failed: %r"
    OBSERVER_FAILED = "Tick observer raised while handling state change"

    # Application Lifecycle
    APP_STARTING = "Starting music player (environment: %s)"
    APP_STOPPED = "Music player stopped"
    APP_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    APP_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
