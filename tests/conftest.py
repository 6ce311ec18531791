from __future__ import annotations

from typing import Callable

import pytest

from playerskills.data.repositories import VocationsRepository
from playerskills.domain.defs import VocationDef
from playerskills.domain.skill_types import VOCATION_SKILLS, Vocation


@pytest.fixture
def vocations_repo() -> VocationsRepository:
    return VocationsRepository()


@pytest.fixture
def make_vocation() -> Callable[..., VocationDef]:
    def _make(vocation: Vocation = Vocation.KNIGHT, multiplier: float = 2.0) -> VocationDef:
        return VocationDef(
            id=vocation,
            key=vocation.slug,
            name=vocation.slug.replace("_", " ").title(),
            description="Test vocation.",
            skill_multipliers={skill: multiplier for skill in VOCATION_SKILLS},
        )

    return _make
