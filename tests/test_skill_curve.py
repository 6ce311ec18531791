from __future__ import annotations

import pytest

from playerskills.domain import skill_curve
from playerskills.domain.skill_types import SkillType


def test_experience_for_level_matches_reference_table() -> None:
    assert skill_curve.experience_for_level(1) == 0
    assert skill_curve.experience_for_level(2) == 100
    assert skill_curve.experience_for_level(3) == 200
    assert skill_curve.experience_for_level(5) == 800
    assert skill_curve.experience_for_level(8) == 4200


def test_experience_level_for_points_boundaries() -> None:
    assert skill_curve.level_for_points(SkillType.EXPERIENCE, 0) == 1
    assert skill_curve.level_for_points(SkillType.EXPERIENCE, 99) == 1
    assert skill_curve.level_for_points(SkillType.EXPERIENCE, 100) == 2
    assert skill_curve.level_for_points(SkillType.EXPERIENCE, 4199) == 7
    assert skill_curve.level_for_points(SkillType.EXPERIENCE, 4200) == 8


def test_melee_steps_grow_with_multiplier() -> None:
    assert skill_curve.required_points(SkillType.SWORD, 10, 2.0) == 0
    assert skill_curve.required_points(SkillType.SWORD, 11, 2.0) == 50
    assert skill_curve.required_points(SkillType.SWORD, 12, 2.0) == 150
    assert skill_curve.required_points(SkillType.SWORD, 13, 2.0) == 350
    assert skill_curve.required_points(SkillType.SWORD, 13, 1.1) == 165  # 50 + 55 + 60


def test_skill_bases_differ_per_category() -> None:
    assert skill_curve.required_points(SkillType.DISTANCE, 11, 2.0) == 30
    assert skill_curve.required_points(SkillType.SHIELDING, 11, 2.0) == 100
    assert skill_curve.required_points(SkillType.FISHING, 11, 2.0) == 20


def test_magic_starts_at_zero_and_uses_mana_base() -> None:
    assert skill_curve.level_for_points(SkillType.MAGIC, 0, 3.0) == 0
    assert skill_curve.required_points(SkillType.MAGIC, 1, 3.0) == 1600
    assert skill_curve.required_points(SkillType.MAGIC, 2, 3.0) == 6400


def test_levels_outside_bounds_saturate() -> None:
    assert skill_curve.required_points(SkillType.SWORD, 3, 2.0) == 0
    assert skill_curve.required_points(SkillType.EXPERIENCE, -4) == 0
    capped = skill_curve.required_points(SkillType.FISHING, skill_curve.MAX_SKILL_LEVEL, 1.1)
    assert skill_curve.required_points(SkillType.FISHING, skill_curve.MAX_SKILL_LEVEL + 50, 1.1) == capped
    assert skill_curve.level_for_points(SkillType.FISHING, capped * 10, 1.1) == skill_curve.MAX_SKILL_LEVEL


def test_progress_percent_within_level() -> None:
    # level 11 spans 50..105 points for multiplier 1.1
    assert skill_curve.progress_percent(SkillType.SWORD, 50, 1.1) == 0
    assert skill_curve.progress_percent(SkillType.SWORD, 80, 1.1) == 54
    assert skill_curve.progress_percent(SkillType.SWORD, 104, 1.1) == 98


def test_progress_percent_is_zero_at_cap() -> None:
    capped = skill_curve.required_points(SkillType.SWORD, skill_curve.MAX_SKILL_LEVEL, 1.1)
    assert skill_curve.progress_percent(SkillType.SWORD, capped + 5, 1.1) == 0


@pytest.mark.parametrize("skill_type", list(SkillType))
@pytest.mark.parametrize("multiplier", [1.1, 1.5, 4.0])
def test_level_is_monotonic_in_points(skill_type: SkillType, multiplier: float) -> None:
    samples = list(range(0, 50_000, 173)) + [10**6, 10**9, 10**12]
    levels = [skill_curve.level_for_points(skill_type, points, multiplier) for points in samples]
    assert levels == sorted(levels)


@pytest.mark.parametrize("skill_type", list(SkillType))
def test_required_points_round_trip(skill_type: SkillType) -> None:
    minimum, _ = skill_curve.level_bounds(skill_type)
    for level in (minimum, minimum + 1, minimum + 7, 60):
        points = skill_curve.required_points(skill_type, level, 1.4)
        assert skill_curve.level_for_points(skill_type, points, 1.4) == level
        if points:
            assert skill_curve.level_for_points(skill_type, points - 1, 1.4) == level - 1
