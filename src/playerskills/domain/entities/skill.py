"""Skill slot model."""
from __future__ import annotations

from dataclasses import dataclass

from playerskills.domain import skill_curve
from playerskills.domain.defs import VocationDef
from playerskills.domain.entities.properties import StoredProperty
from playerskills.domain.errors import InvalidSkillPointsError
from playerskills.domain.skill_types import SkillType


@dataclass(slots=True)
class Skill(StoredProperty):
    """Tracks the accumulated points of one skill category."""

    type: SkillType
    points: int = 0

    def __post_init__(self) -> None:
        self.points = _require_points(self.points, self.type)

    def get_skill_level(self, vocation: VocationDef) -> int:
        return skill_curve.level_for_points(
            self.type, self.points, vocation.multiplier_for(self.type)
        )

    def get_required_skill_points(self, level: int, vocation: VocationDef) -> int:
        """Return the point total at which ``level`` is reached."""
        return skill_curve.required_points(self.type, level, vocation.multiplier_for(self.type))

    def get_skill_percent(self, vocation: VocationDef) -> int:
        return skill_curve.progress_percent(
            self.type, self.points, vocation.multiplier_for(self.type)
        )

    def get_value(self) -> int:
        return self.points

    def set_value(self, value: object) -> None:
        self.points = _require_points(value, self.type)

    def serialize(self) -> int:
        return self.points


def _require_points(value: object, skill_type: SkillType) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSkillPointsError(f"{skill_type.value} points must be an integer.")
    if value < 0:
        raise InvalidSkillPointsError(f"{skill_type.value} points cannot be negative ({value}).")
    return value
