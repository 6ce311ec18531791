"""Factory helpers for runtime entities."""

from .player_factory import create_player, resolve_vocation

__all__ = [
    "create_player",
    "resolve_vocation",
]
