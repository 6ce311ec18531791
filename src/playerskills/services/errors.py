"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a player cannot be created."""


class ProgressionError(Exception):
    """Raised when skill progression cannot be applied."""


class SaveLoadError(Exception):
    """Raised when a player snapshot cannot be serialized or restored."""
