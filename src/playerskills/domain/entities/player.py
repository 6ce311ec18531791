"""Player model."""
from __future__ import annotations

from typing import Hashable, Mapping

from playerskills.domain.defs import VocationDef
from playerskills.domain.entities.properties import PropertyStore
from playerskills.domain.skill_set import SkillSet
from playerskills.domain.skill_types import PropertyKey, SkillType
from playerskills.domain.vocation_formulas import MaximumProperties


class Player:
    """A connected player with a property store and a skill set.

    Maxima are recomputed whenever the experience points or the vocation
    change, through property listeners.
    """

    def __init__(
        self,
        name: str,
        vocation: VocationDef,
        skill_points: Mapping[str, int],
        *,
        properties: PropertyStore | None = None,
    ) -> None:
        self.name = name
        self.properties = properties if properties is not None else PropertyStore()
        self.properties.register(PropertyKey.VOCATION, vocation)
        self.skills = SkillSet(self.properties, self.get_vocation, skill_points)
        self.properties.subscribe(SkillType.EXPERIENCE, self._on_level_input_changed)
        self.properties.subscribe(PropertyKey.VOCATION, self._on_level_input_changed)

    def get_vocation(self) -> VocationDef:
        return self.properties.get(PropertyKey.VOCATION)

    def set_vocation(self, vocation: VocationDef) -> None:
        self.properties.set(PropertyKey.VOCATION, vocation)

    def get_level(self) -> int:
        return self.skills.get_skill_level(SkillType.EXPERIENCE)

    def get_property(self, key: Hashable) -> object:
        return self.properties.value(key)

    def set_property(self, key: Hashable, value: object) -> None:
        self.properties.set(key, value)

    @property
    def maximums(self) -> MaximumProperties:
        return MaximumProperties(
            health=self.properties.value(PropertyKey.HEALTH_MAX),
            mana=self.properties.value(PropertyKey.MANA_MAX),
            capacity=self.properties.value(PropertyKey.CAPACITY_MAX),
        )

    def serialize(self) -> dict[str, object]:
        return {
            "name": self.name,
            "vocation": self.get_vocation().key,
            "skills": self.skills.serialize(),
        }

    def _on_level_input_changed(self, key: Hashable, old: object, new: object) -> None:
        self.skills.recompute_maximum_properties()
