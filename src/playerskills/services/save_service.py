"""Serialization helpers for player skill snapshots."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from playerskills.data.repositories import VocationsRepository
from playerskills.domain.entities import Player
from playerskills.domain.skill_types import CANONICAL_SKILL_ORDER
from playerskills.services.errors import FactoryError, SaveLoadError
from playerskills.services.factories import create_player

SavePayload = Dict[str, Any]


class SaveService:
    """Converts players to/from a validated, versioned payload."""

    SAVE_VERSION = 1

    def __init__(self, *, vocations_repo: VocationsRepository) -> None:
        self._vocations_repo = vocations_repo

    def serialize(self, player: Player) -> SavePayload:
        """Return a JSON-serializable snapshot of ``player``."""
        snapshot = player.serialize()
        skills = snapshot["skills"]
        missing = [name for name, value in skills.items() if value is None]
        if missing:
            raise SaveLoadError(f"Player '{player.name}' has corrupted skills: {missing}.")
        return {
            "save_version": self.SAVE_VERSION,
            "player": snapshot,
        }

    def deserialize(self, payload: Mapping[str, Any]) -> Player:
        """Rebuild a player from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError(f"Unsupported save version {payload.get('save_version')!r}.")
        player_payload = payload.get("player")
        if not isinstance(player_payload, Mapping):
            raise SaveLoadError("Save data is missing the player section.")

        name = self._require_str(player_payload.get("name"), "player.name")
        vocation = self._require_str(player_payload.get("vocation"), "player.vocation")
        skills = self._coerce_skills(player_payload.get("skills"))
        try:
            return create_player(name, vocation, self._vocations_repo, skill_points=skills)
        except FactoryError as exc:
            raise SaveLoadError(f"Unable to restore player '{name}': {exc}") from exc

    def _coerce_skills(self, value: object) -> Dict[str, int]:
        if not isinstance(value, Mapping):
            raise SaveLoadError("player.skills must be an object.")
        expected = {skill.value for skill in CANONICAL_SKILL_ORDER}
        unknown = set(value.keys()) - expected
        if unknown:
            raise SaveLoadError(f"player.skills has unknown entries: {sorted(unknown)}.")
        skills: Dict[str, int] = {}
        for skill in CANONICAL_SKILL_ORDER:
            skills[skill.value] = self._require_non_negative_int(
                value.get(skill.value), f"player.skills.{skill.value}"
            )
        return skills

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value:
            raise SaveLoadError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_non_negative_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        if value < 0:
            raise SaveLoadError(f"{context} cannot be negative.")
        return value
