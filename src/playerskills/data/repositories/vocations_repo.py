"""Vocations repository with multiplier and promotion validation."""
from __future__ import annotations

from typing import Dict

from playerskills.data.errors import DataReferenceError, DataValidationError
from playerskills.data.repositories.base import RepositoryBase
from playerskills.domain.defs import VocationDef
from playerskills.domain.skill_types import VOCATION_SKILLS, SkillType, Vocation

MIN_SKILL_MULTIPLIER = 1.0


class VocationsRepository(RepositoryBase[VocationDef]):
    """Loads vocations and checks their promotion references."""

    def __init__(self, base_path=None) -> None:
        super().__init__("vocations.json", base_path)

    def get_by_vocation(self, vocation: Vocation) -> VocationDef:
        return self.get(Vocation(vocation).slug)

    def get_promotion(self, vocation: Vocation) -> VocationDef | None:
        """Return the vocation promoted from ``vocation``, if any."""
        for candidate in self.all():
            if candidate.promoted_from == vocation:
                return candidate
        return None

    def _build(self, raw: dict[str, object]) -> Dict[str, VocationDef]:
        vocations: Dict[str, VocationDef] = {}
        for raw_id, payload in raw.items():
            try:
                vocation = Vocation.from_slug(raw_id)
            except ValueError as exc:
                raise DataValidationError(f"'{raw_id}' is not a known vocation.") from exc
            data = self._require_mapping(payload, f"vocation '{raw_id}'")
            self._assert_exact_fields(
                data,
                {"name", "description", "skill_multipliers"},
                f"vocation '{raw_id}'",
                optional_fields={"promoted_from"},
            )
            promoted_from = data.get("promoted_from")
            vocations[raw_id] = VocationDef(
                id=vocation,
                key=raw_id,
                name=self._require_str(data["name"], f"vocation '{raw_id}' name"),
                description=self._require_str(data["description"], f"vocation '{raw_id}' description"),
                skill_multipliers=self._require_multipliers(
                    data["skill_multipliers"], f"vocation '{raw_id}' skill_multipliers"
                ),
                promoted_from=self._resolve_promotion(promoted_from, raw, raw_id),
            )
        return vocations

    def _require_multipliers(self, value: object, context: str) -> Dict[SkillType, float]:
        mapping = self._require_mapping(value, context)
        self._assert_exact_fields(mapping, {skill.value for skill in VOCATION_SKILLS}, context)
        multipliers: Dict[SkillType, float] = {}
        for skill in VOCATION_SKILLS:
            entry = mapping[skill.value]
            if isinstance(entry, bool) or not isinstance(entry, (int, float)):
                raise DataValidationError(f"{context} '{skill.value}' must be a number.")
            if entry < MIN_SKILL_MULTIPLIER:
                raise DataValidationError(
                    f"{context} '{skill.value}' must be at least {MIN_SKILL_MULTIPLIER}."
                )
            multipliers[skill] = float(entry)
        return multipliers

    def _resolve_promotion(self, value: object, raw: dict[str, object], raw_id: str) -> Vocation | None:
        if value is None:
            return None
        base = self._require_str(value, f"vocation '{raw_id}' promoted_from")
        if base not in raw:
            raise DataReferenceError(f"vocation '{raw_id}' is promoted from missing vocation '{base}'.")
        if base == raw_id:
            raise DataReferenceError(f"vocation '{raw_id}' cannot be promoted from itself.")
        return Vocation.from_slug(base)
