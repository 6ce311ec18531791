"""Vocation definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from playerskills.domain.skill_types import SkillType, Vocation


@dataclass(slots=True)
class VocationDef:
    """Defines a vocation and its per-skill advancement multipliers."""

    id: Vocation
    key: str
    name: str
    description: str
    skill_multipliers: Dict[SkillType, float] = field(default_factory=dict)
    promoted_from: Vocation | None = None

    def multiplier_for(self, skill_type: SkillType) -> float:
        if skill_type is SkillType.EXPERIENCE:
            return 1.0
        return self.skill_multipliers[skill_type]
