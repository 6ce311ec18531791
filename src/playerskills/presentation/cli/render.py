"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable

from playerskills.domain.entities import Player
from playerskills.domain.skill_types import CANONICAL_SKILL_ORDER

_LABEL_WIDTH = 12


def debug_enabled() -> bool:
    """Return True only when PLAYERSKILLS_DEBUG is explicitly set to '1'."""
    return os.getenv("PLAYERSKILLS_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def format_skill_sheet(player: Player) -> list[str]:
    """Build the skill sheet lines for ``player``."""
    vocation = player.get_vocation()
    maximums = player.maximums
    lines = [
        f"{'Name':<{_LABEL_WIDTH}}{player.name}",
        f"{'Vocation':<{_LABEL_WIDTH}}{vocation.name}",
        f"{'Level':<{_LABEL_WIDTH}}{player.get_level()}",
        f"{'Health':<{_LABEL_WIDTH}}{maximums.health}",
        f"{'Mana':<{_LABEL_WIDTH}}{maximums.mana}",
        f"{'Capacity':<{_LABEL_WIDTH}}{maximums.capacity}",
        "",
    ]
    for skill_type in CANONICAL_SKILL_ORDER:
        level = player.skills.get_skill_level(skill_type)
        percent = player.skills.get_skill_percent(skill_type)
        line = f"{skill_type.value.capitalize():<{_LABEL_WIDTH}}{level:>4} ({percent:>2}%)"
        if debug_enabled():
            line += f"  [{player.skills.get_skill_value(skill_type)} pts]"
        lines.append(line)
    return lines


def render_skill_sheet(player: Player) -> None:
    render_heading("Skills")
    render_lines(format_skill_sheet(player))
