"""Command line skill sheet."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from playerskills.data.errors import DataError
from playerskills.data.repositories import VocationsRepository
from playerskills.domain.skill_types import SkillType
from playerskills.services import FactoryError, ProgressionError, ProgressionService
from playerskills.services.factories import create_player

from .render import debug_enabled, render_skill_sheet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playerskills",
        description="Show the skill sheet of a player with the given vocation and levels.",
    )
    parser.add_argument("--name", default="Player")
    parser.add_argument("--vocation", default="none", help="vocation slug, e.g. elite_knight")
    parser.add_argument("--level", type=int, default=1, help="experience level")
    parser.add_argument(
        "--skill",
        action="append",
        default=[],
        metavar="NAME=LEVEL",
        help="force a skill level, may be repeated",
    )
    parser.add_argument("--definitions", default=None, help="directory holding vocations.json")
    return parser


def _parse_skill_override(raw: str) -> tuple[SkillType, int]:
    name, sep, level = raw.partition("=")
    skill_type = SkillType.coerce(name.strip().lower())
    if not sep or skill_type is None:
        raise ValueError(f"Invalid skill override '{raw}', expected NAME=LEVEL.")
    try:
        return skill_type, int(level)
    except ValueError as exc:
        raise ValueError(f"Invalid level in skill override '{raw}'.") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the skill sheet command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG)

    vocations_repo = VocationsRepository(base_path=args.definitions)
    progression = ProgressionService(vocations_repo=vocations_repo)
    try:
        overrides = [_parse_skill_override(raw) for raw in args.skill]
        player = create_player(args.name, args.vocation, vocations_repo)
        progression.set_skill_level(player, SkillType.EXPERIENCE, args.level)
        for skill_type, level in overrides:
            progression.set_skill_level(player, skill_type, level)
    except (ValueError, DataError, FactoryError, ProgressionError) as exc:
        parser.error(str(exc))
    render_skill_sheet(player)
    return 0
