from __future__ import annotations

import pytest

from playerskills.domain.entities import Skill
from playerskills.domain.errors import InvalidSkillPointsError
from playerskills.domain.skill_types import SkillType


def test_skill_level_uses_vocation_multiplier(make_vocation) -> None:
    skill = Skill(SkillType.SWORD, 150)
    assert skill.get_skill_level(make_vocation(multiplier=2.0)) == 12
    assert skill.get_skill_level(make_vocation(multiplier=1.1)) == 12
    skill.points = 165
    assert skill.get_skill_level(make_vocation(multiplier=2.0)) == 12
    assert skill.get_skill_level(make_vocation(multiplier=1.1)) == 13


def test_experience_ignores_vocation(make_vocation) -> None:
    skill = Skill(SkillType.EXPERIENCE, 4200)
    assert skill.get_skill_level(make_vocation(multiplier=1.1)) == 8
    assert skill.get_skill_level(make_vocation(multiplier=4.0)) == 8
    assert skill.get_required_skill_points(8, make_vocation(multiplier=4.0)) == 4200


def test_serialize_returns_point_total() -> None:
    assert Skill(SkillType.FISHING, 77).serialize() == 77


@pytest.mark.parametrize("points", [-1, 1.5, "10", True])
def test_invalid_points_are_rejected(points: object) -> None:
    with pytest.raises(InvalidSkillPointsError):
        Skill(SkillType.CLUB, points)


def test_set_value_rejects_negative_points() -> None:
    skill = Skill(SkillType.CLUB, 5)
    with pytest.raises(InvalidSkillPointsError):
        skill.set_value(-5)
    assert skill.points == 5
