from __future__ import annotations

import logging

import pytest

from playerskills.domain.entities import PropertyStore
from playerskills.domain.errors import InvalidSkillPointsError, PropertyError, UnknownVocationError
from playerskills.domain.skill_set import SkillSet
from playerskills.domain.skill_types import PropertyKey, SkillType, Vocation

CANONICAL_NAMES = [
    "magic",
    "fist",
    "club",
    "sword",
    "axe",
    "distance",
    "shielding",
    "fishing",
    "experience",
]


def _points(**overrides: int) -> dict[str, int]:
    points = {name: 0 for name in CANONICAL_NAMES}
    points.update(overrides)
    return points


def _build(vocation, **overrides: int) -> tuple[SkillSet, PropertyStore]:
    store = PropertyStore()
    return SkillSet(store, lambda: vocation, _points(**overrides)), store


def _maximums(store: PropertyStore) -> tuple:
    return (
        store.get(PropertyKey.HEALTH_MAX),
        store.get(PropertyKey.MANA_MAX),
        store.get(PropertyKey.CAPACITY_MAX),
    )


def test_construction_registers_all_slots(make_vocation) -> None:
    skills, store = _build(make_vocation(), sword=150)
    for name in CANONICAL_NAMES:
        assert skills.has_skill(name)
        assert store.get(SkillType(name)) is skills.get_skill(name)
    assert skills.get_skill_value(SkillType.SWORD) == 150


def test_construction_computes_maximums(make_vocation) -> None:
    _, store = _build(make_vocation(Vocation.NONE))
    assert _maximums(store) == (150, 55, 400)
    _, store = _build(make_vocation(Vocation.KNIGHT), experience=4200)
    assert _maximums(store) == (185, 90, 470)
    _, store = _build(make_vocation(Vocation.PALADIN), experience=4200)
    assert _maximums(store) == (185, 90, 470)
    _, store = _build(make_vocation(Vocation.SORCERER), experience=4200)
    assert _maximums(store) == (185, 90, 370)


def test_construction_requires_every_skill(make_vocation) -> None:
    points = _points()
    del points["fishing"]
    with pytest.raises(InvalidSkillPointsError):
        SkillSet(PropertyStore(), lambda: make_vocation(), points)


def test_construction_rejects_negative_points(make_vocation) -> None:
    with pytest.raises(InvalidSkillPointsError):
        _build(make_vocation(), axe=-3)


def test_construction_propagates_store_failures(make_vocation) -> None:
    store = PropertyStore()
    store.register(SkillType.CLUB, 0)
    with pytest.raises(PropertyError):
        SkillSet(store, lambda: make_vocation(), _points())


def test_get_skill_level_follows_current_vocation(make_vocation) -> None:
    vocation = {"current": make_vocation(multiplier=2.0)}
    store = PropertyStore()
    skills = SkillSet(store, lambda: vocation["current"], _points(sword=165))
    assert skills.get_skill_level(SkillType.SWORD) == 12
    vocation["current"] = make_vocation(multiplier=1.1)
    assert skills.get_skill_level("sword") == 13


def test_unknown_types_read_as_none(make_vocation) -> None:
    skills, _ = _build(make_vocation())
    for unknown in ("strength", 7, None, PropertyKey.HEALTH_MAX, PropertyKey.VOCATION):
        assert skills.get_skill_value(unknown) is None
        assert skills.get_skill_level(unknown) is None
        assert skills.get_skill_percent(unknown) is None
        assert not skills.has_skill(unknown)


def test_foreign_value_under_skill_key_reads_as_none(make_vocation) -> None:
    skills, store = _build(make_vocation())
    store.remove(SkillType.FISHING)
    store.register(SkillType.FISHING, "rod")
    assert skills.get_skill_value(SkillType.FISHING) is None
    assert skills.get_skill_level(SkillType.FISHING) is None
    assert skills.set_skill_level(SkillType.FISHING, 20) is False
    assert store.get(SkillType.FISHING) == "rod"


def test_set_skill_level_writes_required_points(make_vocation) -> None:
    skills, _ = _build(make_vocation(multiplier=2.0))
    assert skills.set_skill_level(SkillType.SWORD, 13) is True
    assert skills.get_skill_value(SkillType.SWORD) == 350
    assert skills.get_skill_level(SkillType.SWORD) == 13


def test_set_skill_level_goes_through_property_write(make_vocation) -> None:
    skills, store = _build(make_vocation(multiplier=2.0))
    calls = []
    store.subscribe(SkillType.SWORD, lambda key, old, new: calls.append((key, old, new)))
    skills.set_skill_level("sword", 12)
    assert calls == [(SkillType.SWORD, 0, 150)]


def test_set_skill_level_unknown_type_is_ignored(make_vocation, caplog) -> None:
    skills, store = _build(make_vocation())
    before = skills.serialize()
    with caplog.at_level(logging.WARNING, logger="playerskills.domain.skill_set"):
        assert skills.set_skill_level("strength", 50) is False
    assert skills.serialize() == before
    assert "strength" not in store
    assert "unknown skill" in caplog.text


def test_set_skill_level_does_not_recompute_maximums(make_vocation) -> None:
    skills, store = _build(make_vocation(Vocation.KNIGHT))
    before = _maximums(store)
    skills.set_skill_level(SkillType.EXPERIENCE, 8)
    assert skills.get_skill_level(SkillType.EXPERIENCE) == 8
    assert _maximums(store) == before
    skills.recompute_maximum_properties()
    assert _maximums(store) == (185, 90, 470)


def test_recompute_maximums_is_idempotent(make_vocation) -> None:
    skills, store = _build(make_vocation(Vocation.PALADIN), experience=4200)
    first = skills.recompute_maximum_properties()
    skills.recompute_maximum_properties()
    skills.recompute_maximum_properties()
    assert _maximums(store) == (first.health, first.mana, first.capacity) == (185, 90, 470)


def test_recompute_unknown_vocation_raises(make_vocation) -> None:
    vocation = make_vocation()
    skills, _ = _build(vocation)
    vocation.id = 99
    with pytest.raises(UnknownVocationError):
        skills.recompute_maximum_properties()


@pytest.mark.parametrize("name", CANONICAL_NAMES)
def test_level_round_trip_for_every_skill(make_vocation, name: str) -> None:
    for multiplier in (1.1, 1.8, 3.0):
        skills, _ = _build(make_vocation(multiplier=multiplier))
        for level in (10, 11, 25, 40):
            skills.set_skill_level(name, level)
            assert skills.get_skill_level(name) == level


@pytest.mark.parametrize("name", CANONICAL_NAMES)
def test_level_never_drops_as_points_grow(make_vocation, name: str) -> None:
    skills, _ = _build(make_vocation(multiplier=1.5))
    previous = skills.get_skill_level(name)
    for _ in range(60):
        skills.add_skill_points(name, 97)
        current = skills.get_skill_level(name)
        assert current >= previous
        previous = current


def test_add_skill_points_accumulates(make_vocation) -> None:
    skills, _ = _build(make_vocation(multiplier=2.0), axe=20)
    assert skills.add_skill_points(SkillType.AXE, 30) is True
    assert skills.get_skill_value(SkillType.AXE) == 50
    assert skills.get_skill_level(SkillType.AXE) == 11
    assert skills.add_skill_points("strength", 30) is False
    with pytest.raises(InvalidSkillPointsError):
        skills.add_skill_points(SkillType.AXE, -1)


def test_set_skill_value_writes_raw_points(make_vocation) -> None:
    skills, _ = _build(make_vocation())
    assert skills.set_skill_value(SkillType.SHIELDING, 123) is True
    assert skills.get_skill_value("shielding") == 123
    assert skills.set_skill_value("strength", 1) is False


def test_serialize_has_exactly_the_canonical_keys(make_vocation) -> None:
    skills, store = _build(make_vocation(), magic=1600, experience=100)
    payload = skills.serialize()
    assert list(payload) == CANONICAL_NAMES
    assert payload["magic"] == 1600
    assert payload["experience"] == 100

    store.remove(SkillType.AXE)
    store.register(SkillType.AXE, {"not": "a skill"})
    payload = skills.serialize()
    assert list(payload) == CANONICAL_NAMES
    assert payload["axe"] is None


def test_levels_reports_every_skill(make_vocation) -> None:
    skills, _ = _build(make_vocation(), experience=4200)
    levels = skills.levels()
    assert levels["experience"] == 8
    assert levels["magic"] == 0
    assert levels["sword"] == 10
