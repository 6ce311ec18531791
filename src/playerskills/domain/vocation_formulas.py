"""Level and vocation based maximum health, mana and capacity."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from playerskills.domain.errors import UnknownVocationError
from playerskills.domain.skill_types import Vocation


@dataclass(frozen=True, slots=True)
class MaximumProperties:
    health: int
    mana: int
    capacity: int


def _unpromoted(level: int) -> MaximumProperties:
    return MaximumProperties(
        health=5 * (level + 29),
        mana=5 * (level + 10),
        capacity=10 * (level + 39),
    )


def _knight(level: int) -> MaximumProperties:
    return MaximumProperties(
        health=5 * (3 * level + 13),
        mana=5 * (level + 10),
        capacity=5 * (5 * level + 54),
    )


def _paladin(level: int) -> MaximumProperties:
    return MaximumProperties(
        health=5 * (2 * level + 21),
        mana=5 * (3 * level - 6),
        capacity=10 * (2 * level + 31),
    )


def _mage(level: int) -> MaximumProperties:
    return MaximumProperties(
        health=5 * (level + 29),
        mana=5 * (6 * level - 30),
        capacity=10 * (level + 39),
    )


VOCATION_FORMULAS: Dict[Vocation, Callable[[int], MaximumProperties]] = {
    Vocation.NONE: _unpromoted,
    Vocation.KNIGHT: _knight,
    Vocation.ELITE_KNIGHT: _knight,
    Vocation.PALADIN: _paladin,
    Vocation.ROYAL_PALADIN: _paladin,
    Vocation.SORCERER: _mage,
    Vocation.MASTER_SORCERER: _mage,
    Vocation.DRUID: _mage,
    Vocation.ELDER_DRUID: _mage,
}


def compute_maximum_properties(vocation: Vocation | int, level: int) -> MaximumProperties:
    """Return the maxima for ``vocation`` at experience ``level``.

    Raises:
        UnknownVocationError: ``vocation`` is not a known vocation id.
    """
    try:
        formula = VOCATION_FORMULAS[Vocation(vocation)]
    except (ValueError, KeyError) as exc:
        raise UnknownVocationError(f"No maximum-property formula for vocation {vocation!r}.") from exc
    return formula(level)
