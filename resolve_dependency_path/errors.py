"""Exceptions raised while resolving dependency paths."""

from pathlib import Path


class ResolutionError(Exception):
    """Base class for dependency path resolution errors."""


class MissingArgumentError(ResolutionError, ValueError):
    """Raised when a required resolution input is empty or absent.

    Attributes:
        argument: Name of the missing input ("dependency", "filename" or "directory")
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} not given")


class AliasResolutionError(ResolutionError):
    """Raised when an alias configuration cannot be loaded or validated."""

    def __init__(self, config_path: Path, message: str):
        self.config_path = config_path
        self.message = message
        super().__init__(f"{message} ({config_path})")
