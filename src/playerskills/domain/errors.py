"""Domain-level exceptions."""


class DomainError(Exception):
    """Base exception for the domain layer."""


class InvalidSkillPointsError(DomainError, ValueError):
    """Raised when a skill point total is missing or negative."""


class UnknownVocationError(DomainError):
    """Raised when no maximum-property formula exists for a vocation."""


class PropertyError(DomainError):
    """Raised when a property store operation cannot be applied."""
