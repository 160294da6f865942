"""Dependency path resolution.

Combines base path computation and extension inference, with optional alias
rewriting before and filesystem probing after.
"""

import logging
import os

from .alias_resolution.protocol import AliasResolver
from .base import resolve_base
from .errors import MissingArgumentError
from .extension import infer_extension
from .loader_plugins import has_loader_suffix
from .probe import FileExistenceProbe

logger = logging.getLogger(__name__)


class PathResolver:
    """Resolves dependency references to absolute file paths.

    Without collaborators, resolution is a pure string computation: nothing
    is read from disk and the result may not exist.

    Resolution steps:
    1. Validate inputs (dependency, filename, directory)
    2. Alias rewriting, if an alias resolver is configured
    3. Base path + inferred extension
    4. Filesystem probing, if a probe is configured and no loader directive
       fixed the extension
    """

    def __init__(
        self,
        alias_resolver: AliasResolver | None = None,
        probe: FileExistenceProbe | None = None,
    ):
        """Initialize resolver.

        Args:
            alias_resolver: Optional collaborator that rewrites dependencies
                (module aliases, loader-plugin tables). Its errors propagate.
            probe: Optional collaborator consulted after pure resolution
        """
        self.alias_resolver = alias_resolver
        self.probe = probe

    def resolve(self, dependency: str | None, filename: str | None, directory: str | None) -> str:
        """Resolve a dependency to an absolute path.

        Args:
            dependency: Dependency reference as written in source
            filename: Absolute path of the file containing the reference
            directory: Absolute path of the project root

        Returns:
            Absolute resolved path

        Raises:
            MissingArgumentError: A required input is empty or None
            AliasResolutionError: Raised by the alias resolver
        """
        if not dependency:
            raise MissingArgumentError("dependency")
        if not filename:
            raise MissingArgumentError("filename")
        if not directory:
            raise MissingArgumentError("directory")

        if self.alias_resolver is not None:
            alias = self.alias_resolver.resolve(dependency, directory)
            if alias.extension_resolved:
                if os.path.isabs(alias.dependency):
                    logger.debug(f"[resolve] {dependency} -> {alias.dependency} (alias)")
                    return alias.dependency
                resolved = resolve_base(alias.dependency, filename, directory)
                logger.debug(f"[resolve] {dependency} -> {resolved} (alias)")
                return resolved
            dependency = alias.dependency

        base = resolve_base(dependency, filename, directory)
        extension = infer_extension(dependency, filename)
        resolved = f"{base}{extension}"

        # A loader directive fixes the extension; the probe must not replace it
        if self.probe is not None and not has_loader_suffix(dependency):
            probed = self.probe.probe(base, extension)
            if probed is not None:
                logger.debug(f"[resolve] {dependency} -> {probed} (probe)")
                return probed

        logger.debug(f"[resolve] {dependency} -> {resolved}")
        return resolved

    def __repr__(self) -> str:
        return f"PathResolver(alias_resolver={self.alias_resolver!r}, probe={self.probe!r})"


def resolve_dependency_path(
    dependency: str | None = None,
    filename: str | None = None,
    directory: str | None = None,
    *,
    alias_resolver: AliasResolver | None = None,
    probe: FileExistenceProbe | None = None,
) -> str:
    """Resolve a dependency reference to an absolute path.

    Args:
        dependency: Dependency reference as written in source (e.g. "./bar")
        filename: Absolute path of the file containing the reference
        directory: Absolute path of the project root
        alias_resolver: Optional alias/loader-plugin collaborator
        probe: Optional filesystem probe

    Returns:
        Absolute resolved path

    Raises:
        MissingArgumentError: A required input is empty or None

    Examples:
        >>> resolve_dependency_path("./bar", "/proj/foo.js", "/proj")
        '/proj/bar.js'
        >>> resolve_dependency_path("templates/file.txt!text", "/proj/foo.js", "/proj")
        '/proj/templates/file.txt'
    """
    return PathResolver(alias_resolver=alias_resolver, probe=probe).resolve(dependency, filename, directory)
