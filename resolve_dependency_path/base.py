"""Base path computation: where a dependency lives, before any extension is added."""

import os

from .loader_plugins import strip_loader_suffix


def is_relative(dependency: str) -> bool:
    """A dependency is relative when it starts with a period (``./x`` or ``../x``)."""
    return dependency.startswith(".")


def resolve_base(dependency: str, filename: str, directory: str) -> str:
    """Resolve a dependency to an absolute path without inferring its extension.

    Relative dependencies are resolved against the directory containing
    ``filename``; everything else against ``directory`` (the project root).
    A suffix-form loader directive (``file.css!``) is removed along with the
    extension before it, which extension inference adds back.

    Args:
        dependency: Dependency reference as written in source
        filename: Absolute path of the file containing the reference
        directory: Absolute path of the project root

    Returns:
        Normalized absolute path, without trailing separator
    """
    if is_relative(dependency):
        parent = os.path.dirname(filename)
    else:
        parent = directory

    return os.path.abspath(os.path.join(parent, strip_loader_suffix(dependency)))
