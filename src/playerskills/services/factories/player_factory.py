"""Factory for creating players from vocation definitions."""
from __future__ import annotations

from typing import Mapping

from playerskills.data.repositories import VocationsRepository
from playerskills.domain.defs import VocationDef
from playerskills.domain.entities import Player
from playerskills.domain.errors import InvalidSkillPointsError
from playerskills.domain.skill_types import CANONICAL_SKILL_ORDER, SkillType, Vocation
from playerskills.services.errors import FactoryError


def resolve_vocation(vocation: str | Vocation, vocations_repo: VocationsRepository) -> VocationDef:
    """Look up a vocation definition by slug or enum value."""
    try:
        if isinstance(vocation, Vocation):
            return vocations_repo.get_by_vocation(vocation)
        return vocations_repo.get(vocation)
    except KeyError as exc:
        raise FactoryError(f"Vocation '{vocation}' not found.") from exc


def create_player(
    name: str,
    vocation: str | Vocation,
    vocations_repo: VocationsRepository,
    *,
    skill_points: Mapping[str, int] | None = None,
) -> Player:
    """Instantiate a player, filling unspecified skills with zero points."""
    vocation_def = resolve_vocation(vocation, vocations_repo)
    provided = dict(skill_points or {})
    unknown = [key for key in provided if SkillType.coerce(key) is None]
    if unknown:
        raise FactoryError(f"Unknown skills in initial points: {sorted(map(str, unknown))}.")
    points = {
        skill.value: provided.get(skill.value, 0) for skill in CANONICAL_SKILL_ORDER
    }
    try:
        return Player(name, vocation_def, points)
    except InvalidSkillPointsError as exc:
        raise FactoryError(f"Invalid initial skill points for '{name}': {exc}") from exc
