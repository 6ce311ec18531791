"""Domain definition exports."""

from .vocation_def import VocationDef

__all__ = ["VocationDef"]
