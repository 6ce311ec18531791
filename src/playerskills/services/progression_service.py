"""Skill progression: granting points, forcing levels and promotions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from playerskills.data.repositories import VocationsRepository
from playerskills.domain.entities import Player
from playerskills.domain.skill_types import SkillType
from playerskills.domain.vocation_formulas import MaximumProperties
from playerskills.services.errors import ProgressionError

logger = logging.getLogger(__name__)


class ProgressionEvent:
    """Base class for progression events."""


@dataclass(slots=True)
class SkillPointsGainedEvent(ProgressionEvent):
    skill_type: SkillType
    amount: int
    total_points: int


@dataclass(slots=True)
class SkillLevelChangedEvent(ProgressionEvent):
    skill_type: SkillType
    old_level: int
    new_level: int


@dataclass(slots=True)
class MaximumsChangedEvent(ProgressionEvent):
    maximums: MaximumProperties


@dataclass(slots=True)
class VocationChangedEvent(ProgressionEvent):
    old_vocation: str
    new_vocation: str


class ProgressionService:
    """Applies progression changes to players and reports what happened."""

    def __init__(self, *, vocations_repo: VocationsRepository) -> None:
        self._vocations_repo = vocations_repo

    def grant_skill_points(
        self, player: Player, skill_type: SkillType | str, amount: int
    ) -> List[ProgressionEvent]:
        """Add ``amount`` points to one skill of ``player``."""
        resolved = self._require_skill_type(skill_type)
        if amount < 0:
            raise ProgressionError(f"Cannot grant a negative amount of points ({amount}).")
        old_level = player.skills.get_skill_level(resolved)
        player.skills.add_skill_points(resolved, amount)
        events: List[ProgressionEvent] = [
            SkillPointsGainedEvent(
                skill_type=resolved,
                amount=amount,
                total_points=player.skills.get_skill_value(resolved),
            )
        ]
        events.extend(self._level_change_events(player, resolved, old_level))
        return events

    def grant_experience(self, player: Player, amount: int) -> List[ProgressionEvent]:
        return self.grant_skill_points(player, SkillType.EXPERIENCE, amount)

    def set_skill_level(
        self, player: Player, skill_type: SkillType | str, level: int
    ) -> List[ProgressionEvent]:
        """Force a skill to ``level``; unknown skills are rejected."""
        resolved = self._require_skill_type(skill_type)
        old_level = player.skills.get_skill_level(resolved)
        if not player.skills.set_skill_level(resolved, level):
            raise ProgressionError(f"Player '{player.name}' has no '{resolved.value}' skill.")
        return self._level_change_events(player, resolved, old_level)

    def promote(self, player: Player) -> List[ProgressionEvent]:
        """Switch ``player`` to the promoted form of their vocation."""
        current = player.get_vocation()
        promotion = self._vocations_repo.get_promotion(current.id)
        if promotion is None:
            raise ProgressionError(f"Vocation '{current.key}' has no promotion.")
        player.set_vocation(promotion)
        logger.info("Promoted %s from %s to %s", player.name, current.key, promotion.key)
        return [
            VocationChangedEvent(old_vocation=current.key, new_vocation=promotion.key),
            MaximumsChangedEvent(maximums=player.maximums),
        ]

    def _level_change_events(
        self, player: Player, skill_type: SkillType, old_level: int
    ) -> List[ProgressionEvent]:
        new_level = player.skills.get_skill_level(skill_type)
        if new_level == old_level:
            return []
        logger.debug(
            "%s changed %s from %s to %s", player.name, skill_type.value, old_level, new_level
        )
        events: List[ProgressionEvent] = [
            SkillLevelChangedEvent(skill_type=skill_type, old_level=old_level, new_level=new_level)
        ]
        if skill_type is SkillType.EXPERIENCE:
            events.append(MaximumsChangedEvent(maximums=player.maximums))
        return events

    @staticmethod
    def _require_skill_type(skill_type: SkillType | str) -> SkillType:
        resolved = SkillType.coerce(skill_type)
        if resolved is None:
            raise ProgressionError(f"Unknown skill '{skill_type}'.")
        return resolved
