"""Skill aggregate for a single player."""
from __future__ import annotations

import logging
from typing import Callable, Hashable, Mapping

from playerskills.domain.defs import VocationDef
from playerskills.domain.entities.properties import PropertyStore
from playerskills.domain.entities.skill import Skill
from playerskills.domain.errors import InvalidSkillPointsError
from playerskills.domain.skill_types import CANONICAL_SKILL_ORDER, PropertyKey, SkillType
from playerskills.domain.vocation_formulas import MaximumProperties, compute_maximum_properties

logger = logging.getLogger(__name__)

VocationGetter = Callable[[], VocationDef]


class SkillSet:
    """Owns the nine skill slots of a player and keeps derived maxima in sync.

    The slots live in the player's property store under their ``SkillType``
    key. Reads tolerate unknown keys and foreign values stored under a skill
    key by returning ``None``; writes report them by returning ``False``.

    Level writes go through ``PropertyStore.set`` so property listeners see
    them. Maximum-property recomputation is never triggered from here except
    at construction; the owner decides when level or vocation changes warrant
    it.
    """

    def __init__(
        self,
        properties: PropertyStore,
        get_vocation: VocationGetter,
        points: Mapping[str, int],
    ) -> None:
        self._properties = properties
        self._get_vocation = get_vocation
        for skill_type in CANONICAL_SKILL_ORDER:
            self._properties.register(skill_type, Skill(skill_type, _initial_points(points, skill_type)))
        self.recompute_maximum_properties()

    def get_skill(self, skill_type: Hashable) -> Skill | None:
        """Return the slot registered under ``skill_type`` if it is a skill."""
        stored = self._properties.get(skill_type)
        if not isinstance(stored, Skill):
            return None
        return stored

    def has_skill(self, skill_type: Hashable) -> bool:
        return self.get_skill(skill_type) is not None

    def get_skill_value(self, skill_type: Hashable) -> int | None:
        skill = self.get_skill(skill_type)
        if skill is None:
            return None
        return skill.serialize()

    def get_skill_level(self, skill_type: Hashable) -> int | None:
        """Return the level of ``skill_type`` under the current vocation."""
        skill = self.get_skill(skill_type)
        if skill is None:
            return None
        return skill.get_skill_level(self._get_vocation())

    def get_skill_percent(self, skill_type: Hashable) -> int | None:
        skill = self.get_skill(skill_type)
        if skill is None:
            return None
        return skill.get_skill_percent(self._get_vocation())

    def set_skill_level(self, skill_type: Hashable, level: int) -> bool:
        """Force ``skill_type`` to ``level`` by writing the matching point total.

        Returns False without writing anything when ``skill_type`` is not a
        registered skill.
        """
        skill = self.get_skill(skill_type)
        if skill is None:
            logger.warning("Ignoring level write for unknown skill %r", skill_type)
            return False
        points = skill.get_required_skill_points(level, self._get_vocation())
        self._properties.set(skill.type, points)
        return True

    def set_skill_value(self, skill_type: Hashable, points: int) -> bool:
        skill = self.get_skill(skill_type)
        if skill is None:
            logger.warning("Ignoring point write for unknown skill %r", skill_type)
            return False
        self._properties.set(skill.type, points)
        return True

    def add_skill_points(self, skill_type: Hashable, amount: int) -> bool:
        """Grant ``amount`` points to ``skill_type`` through the property store."""
        skill = self.get_skill(skill_type)
        if skill is None:
            logger.warning("Ignoring point grant for unknown skill %r", skill_type)
            return False
        if amount < 0:
            raise InvalidSkillPointsError(f"Cannot grant negative points ({amount}).")
        self._properties.add(skill.type, amount)
        return True

    def recompute_maximum_properties(self) -> MaximumProperties:
        """Write health, mana and capacity maxima for the current level.

        Values are overwritten, so calling this repeatedly is idempotent.
        """
        vocation = self._get_vocation()
        level = self.get_skill_level(SkillType.EXPERIENCE)
        maximums = compute_maximum_properties(vocation.id, level)
        self._properties.set(PropertyKey.HEALTH_MAX, maximums.health)
        self._properties.set(PropertyKey.MANA_MAX, maximums.mana)
        self._properties.set(PropertyKey.CAPACITY_MAX, maximums.capacity)
        logger.debug(
            "Maximums for %s at level %s: %s",
            vocation.key,
            level,
            maximums,
        )
        return maximums

    def levels(self) -> dict[str, int | None]:
        return {skill_type.value: self.get_skill_level(skill_type) for skill_type in CANONICAL_SKILL_ORDER}

    def serialize(self) -> dict[str, int | None]:
        """Return the point totals keyed by canonical skill name."""
        return {skill_type.value: self.get_skill_value(skill_type) for skill_type in CANONICAL_SKILL_ORDER}


def _initial_points(points: Mapping[str, int], skill_type: SkillType) -> int:
    if skill_type.value in points:
        return points[skill_type.value]
    raise InvalidSkillPointsError(f"Missing initial points for skill '{skill_type.value}'.")
