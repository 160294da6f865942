"""Resolve dependency references found in source files to absolute file paths."""

from .alias_resolution import AliasResolution
from .alias_resolution import AliasResolver
from .alias_resolution import ConfigAliasResolver
from .base import resolve_base
from .errors import AliasResolutionError
from .errors import MissingArgumentError
from .errors import ResolutionError
from .extension import infer_extension
from .probe import ExtensionProbe
from .probe import FileExistenceProbe
from .resolver import PathResolver
from .resolver import resolve_dependency_path

__all__ = [
    "AliasResolution",
    "AliasResolutionError",
    "AliasResolver",
    "ConfigAliasResolver",
    "ExtensionProbe",
    "FileExistenceProbe",
    "MissingArgumentError",
    "PathResolver",
    "ResolutionError",
    "infer_extension",
    "resolve_base",
    "resolve_dependency_path",
]
