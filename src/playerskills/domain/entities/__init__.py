"""Runtime entity exports."""

from .properties import PropertyStore, StoredProperty
from .skill import Skill
from .player import Player

__all__ = [
    "Player",
    "PropertyStore",
    "Skill",
    "StoredProperty",
]
