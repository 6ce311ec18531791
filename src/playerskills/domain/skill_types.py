"""Enumerations shared across the domain layer."""
from __future__ import annotations

from enum import Enum, IntEnum


class SkillType(str, Enum):
    """Skill categories tracked for every player.

    The value doubles as the canonical serialized name and as the property
    store key, so ``"sword"`` and ``SkillType.SWORD`` address the same slot.
    """

    MAGIC = "magic"
    FIST = "fist"
    CLUB = "club"
    SWORD = "sword"
    AXE = "axe"
    DISTANCE = "distance"
    SHIELDING = "shielding"
    FISHING = "fishing"
    EXPERIENCE = "experience"

    @classmethod
    def coerce(cls, value: object) -> SkillType | None:
        """Return the matching member, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


# Serialization order of the skill snapshot.
CANONICAL_SKILL_ORDER: tuple[SkillType, ...] = tuple(SkillType)

# Skills whose curve depends on a per-vocation multiplier.
VOCATION_SKILLS: tuple[SkillType, ...] = tuple(
    skill for skill in SkillType if skill is not SkillType.EXPERIENCE
)


class Vocation(IntEnum):
    """Character classes, numbered as in the reference game."""

    NONE = 0
    SORCERER = 1
    DRUID = 2
    PALADIN = 3
    KNIGHT = 4
    MASTER_SORCERER = 5
    ELDER_DRUID = 6
    ROYAL_PALADIN = 7
    ELITE_KNIGHT = 8

    @property
    def slug(self) -> str:
        return self.name.lower()

    @classmethod
    def from_slug(cls, slug: str) -> Vocation:
        """Resolve a lowercase slug such as ``elite_knight``."""
        try:
            return cls[slug.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown vocation '{slug}'.") from exc


class PropertyKey(str, Enum):
    """Non-skill keys held in a player's property store."""

    VOCATION = "vocation"
    HEALTH_MAX = "health_max"
    MANA_MAX = "mana_max"
    CAPACITY_MAX = "capacity_max"


__all__ = [
    "CANONICAL_SKILL_ORDER",
    "PropertyKey",
    "SkillType",
    "VOCATION_SKILLS",
    "Vocation",
]
