"""Extension inference for dependency references."""

import os

from .loader_plugins import LOADER_MARKER
from .loader_plugins import dependency_extension
from .loader_plugins import loader_extension

JS_EXTENSION = ".js"


def infer_extension(dependency: str, filename: str) -> str:
    """Decide which extension, if any, to append to a dependency's base path.

    Rules, checked in order:
    1. No extension on the dependency: borrow the referencing file's extension.
    2. Referencing file is ``.js``, dependency extension is not ``.js`` and there
       is no loader marker: the period belongs to the name (``bar.baz.qux``), so
       ``.js`` is still appended.
    3. Suffix-form loader directive: keep the asset extension before the marker
       (``file.css!`` -> ``.css``, ``file.txt!text`` -> ``.txt``).
    4. Otherwise the dependency already carries its extension.

    Args:
        dependency: Dependency reference as written in source
        filename: Path of the file containing the reference

    Returns:
        Extension with leading period, or empty string

    Examples:
        >>> infer_extension("./bar", "/proj/foo.js")
        '.js'
        >>> infer_extension("./index.js", "/proj/foo.js")
        ''
        >>> infer_extension("templates/file.css!", "/proj/foo.js")
        '.css'
    """
    dep_ext = dependency_extension(dependency)
    file_ext = os.path.splitext(filename)[1]

    if not dep_ext:
        return file_ext

    if file_ext == JS_EXTENSION and dep_ext != JS_EXTENSION and LOADER_MARKER not in dependency:
        return file_ext

    if LOADER_MARKER in dep_ext:
        return loader_extension(dep_ext)

    return ""
