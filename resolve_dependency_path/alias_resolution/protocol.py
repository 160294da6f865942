"""Alias resolver protocol and its result type."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AliasResolution:
    """Outcome of an alias lookup.

    Attributes:
        dependency: The dependency to resolve, rewritten or unchanged
        extension_resolved: True when the resolver already settled the file
            extension, so no inference should be applied. An absolute
            dependency with this flag set is the final path.
    """

    dependency: str
    extension_resolved: bool = False


class AliasResolver(Protocol):
    """Protocol for collaborators that rewrite dependencies before resolution."""

    def resolve(self, dependency: str, directory: str) -> AliasResolution:
        """Rewrite a dependency using alias or loader-plugin knowledge."""
        ...
