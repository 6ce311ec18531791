"""Repository exports."""

from .vocations_repo import VocationsRepository

__all__ = ["VocationsRepository"]
