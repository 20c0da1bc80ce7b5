# ruff: noqa: N999
"""
Domain Layer

Contains pure playback logic organized by bounded contexts:
- shared/: Constrained types, messages and exceptions
- music/: Track catalog and playback state
"""

from music_player.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
