"""Helpers for the `!` loader-plugin marker.

Two placements of the marker are seen in the wild:

- Suffix form (SystemJS/jspm): ``templates/file.css!`` or ``templates/file.txt!text``.
  The real asset extension sits right before the marker.
- Prefix form (RequireJS): ``hgn!templates/a``. The plugin name comes first and the
  resource follows the marker.

Only the suffix form is understood by the core resolver. The prefix form needs a
plugin table and is left to an alias resolver.
"""

import os

LOADER_MARKER = "!"


def dependency_extension(dependency: str) -> str:
    """Return the extension of the final path segment, including any `!...` tail.

    Examples:
        >>> dependency_extension("./bar.baz.qux")
        '.qux'
        >>> dependency_extension("templates/file.txt!text")
        '.txt!text'
        >>> dependency_extension("./bar")
        ''
    """
    return os.path.splitext(dependency)[1]


def has_loader_suffix(dependency: str) -> bool:
    """Check whether the marker falls inside the dependency's extension."""
    return LOADER_MARKER in dependency_extension(dependency)


def strip_loader_suffix(dependency: str) -> str:
    """Drop a suffix-form loader directive together with the extension before it.

    ``templates/file.css!`` becomes ``templates/file``. Dependencies without a
    suffix-form marker are returned unchanged.
    """
    if has_loader_suffix(dependency):
        return os.path.splitext(dependency)[0]
    return dependency


def loader_extension(extension: str) -> str:
    """Return the part of an extracted extension before the marker (``.css!`` -> ``.css``)."""
    return extension.split(LOADER_MARKER, 1)[0]


def split_loader_prefix(dependency: str) -> tuple[str | None, str]:
    """Split a prefix-form reference into (plugin, resource).

    Returns (None, dependency) for references without a marker or whose marker
    belongs to the suffix form.

    Examples:
        >>> split_loader_prefix("hgn!templates/a")
        ('hgn', 'templates/a')
        >>> split_loader_prefix("templates/file.css!")
        (None, 'templates/file.css!')
    """
    if LOADER_MARKER not in dependency or has_loader_suffix(dependency):
        return None, dependency

    plugin, resource = dependency.split(LOADER_MARKER, 1)
    if not plugin or not resource:
        return None, dependency
    return plugin, resource
