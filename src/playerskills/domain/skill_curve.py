"""Point curves that map accumulated skill points to levels and back.

Every category advances one level at a time and each step has a positive
cost, so the required total grows strictly with level and the level reached
for a given point total is monotonic.

- Experience uses the closed-form cubic of the reference game and ignores
  vocation.
- Magic starts at level 0; the step to level ``l`` costs
  ``1600 * m ** (l - 1)`` mana.
- Every other skill starts at level 10; the step to level ``l`` costs
  ``base * m ** (l - 11)`` tries, with a per-skill base.

``m`` is the vocation multiplier for the skill. Levels outside the supported
range saturate at the nearest bound.
"""
from __future__ import annotations

from playerskills.domain.skill_types import SkillType

MIN_EXPERIENCE_LEVEL = 1
MAX_EXPERIENCE_LEVEL = 2000
MIN_MAGIC_LEVEL = 0
MAX_MAGIC_LEVEL = 200
MIN_SKILL_LEVEL = 10
MAX_SKILL_LEVEL = 200

MAGIC_BASE_MANA = 1600
SKILL_BASE_TRIES: dict[SkillType, int] = {
    SkillType.FIST: 50,
    SkillType.CLUB: 50,
    SkillType.SWORD: 50,
    SkillType.AXE: 50,
    SkillType.DISTANCE: 30,
    SkillType.SHIELDING: 100,
    SkillType.FISHING: 20,
}


def level_bounds(skill_type: SkillType) -> tuple[int, int]:
    """Return the (minimum, maximum) level supported for ``skill_type``."""
    if skill_type is SkillType.EXPERIENCE:
        return MIN_EXPERIENCE_LEVEL, MAX_EXPERIENCE_LEVEL
    if skill_type is SkillType.MAGIC:
        return MIN_MAGIC_LEVEL, MAX_MAGIC_LEVEL
    return MIN_SKILL_LEVEL, MAX_SKILL_LEVEL


def experience_for_level(level: int) -> int:
    """Total experience needed to reach ``level``."""
    n = max(MIN_EXPERIENCE_LEVEL, level) - 1
    return ((50 * n**3) - (150 * n**2) + (400 * n)) // 3


def step_cost(skill_type: SkillType, level: int, multiplier: float) -> int:
    """Points needed to advance from ``level - 1`` to ``level``."""
    if skill_type is SkillType.EXPERIENCE:
        return experience_for_level(level) - experience_for_level(level - 1)
    if skill_type is SkillType.MAGIC:
        return int(MAGIC_BASE_MANA * multiplier ** (level - 1))
    return int(SKILL_BASE_TRIES[skill_type] * multiplier ** (level - MIN_SKILL_LEVEL - 1))


def required_points(skill_type: SkillType, level: int, multiplier: float = 1.0) -> int:
    """Total points needed to reach ``level``, clamped to the supported range."""
    minimum, maximum = level_bounds(skill_type)
    target = min(max(level, minimum), maximum)
    if skill_type is SkillType.EXPERIENCE:
        return experience_for_level(target)
    return sum(step_cost(skill_type, lvl, multiplier) for lvl in range(minimum + 1, target + 1))


def level_for_points(skill_type: SkillType, points: int, multiplier: float = 1.0) -> int:
    """Return the highest level whose required total does not exceed ``points``."""
    minimum, maximum = level_bounds(skill_type)
    level = minimum
    total = 0
    while level < maximum:
        next_total = total + step_cost(skill_type, level + 1, multiplier)
        if next_total > points:
            break
        level += 1
        total = next_total
    return level


def progress_percent(skill_type: SkillType, points: int, multiplier: float = 1.0) -> int:
    """Whole percent of the way from the current level to the next one."""
    level = level_for_points(skill_type, points, multiplier)
    _, maximum = level_bounds(skill_type)
    if level >= maximum:
        return 0
    floor = required_points(skill_type, level, multiplier)
    span = step_cost(skill_type, level + 1, multiplier)
    return (100 * (points - floor)) // span
