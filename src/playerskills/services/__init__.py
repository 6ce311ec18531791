"""Service layer exports."""

from .errors import FactoryError, ProgressionError, SaveLoadError
from .progression_service import (
    MaximumsChangedEvent,
    ProgressionEvent,
    ProgressionService,
    SkillLevelChangedEvent,
    SkillPointsGainedEvent,
    VocationChangedEvent,
)
from .save_service import SaveService

__all__ = [
    "FactoryError",
    "MaximumsChangedEvent",
    "ProgressionError",
    "ProgressionEvent",
    "ProgressionService",
    "SaveLoadError",
    "SaveService",
    "SkillLevelChangedEvent",
    "SkillPointsGainedEvent",
    "VocationChangedEvent",
]
