"""Optional filesystem probing after pure resolution.

Pure resolution never touches the disk, so it can only guess. A probe looks
at what actually exists and may replace the guess, e.g. ``./styles/foo.css``
imported from a ``.js`` file resolves to ``foo.css.js`` by inference, and the
probe corrects it to ``foo.css``.
"""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".json")


class FileExistenceProbe(Protocol):
    """Protocol for filesystem probes used after pure resolution."""

    def probe(self, base: str, extension: str) -> str | None:
        """Return an existing path to use instead of ``base + extension``, or None."""
        ...


class ExtensionProbe:
    """Probe that tries the inferred path, the bare base, then known extensions.

    Lookup order (first existing file wins):
    1. base + inferred extension -> None (keep the pure result)
    2. base as-is
    3. base + each configured extension
    4. base/index + each configured extension
    """

    def __init__(self, extensions: tuple[str, ...] | list[str] | None = None):
        if extensions is None:
            extensions = DEFAULT_EXTENSIONS
        self.extensions = tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions)

    def probe(self, base: str, extension: str) -> str | None:
        """Look for an existing file matching the resolved base.

        Args:
            base: Resolved path without extension
            extension: Extension chosen by inference (may be empty)

        Returns:
            Path of an existing file that should replace the inferred one,
            or None when the inferred path exists or nothing matches
        """
        if Path(f"{base}{extension}").is_file():
            return None

        for candidate in self._candidates(base):
            if candidate.is_file():
                logger.debug(f"[probe] {base}{extension} not found, using {candidate}")
                return str(candidate)

        logger.debug(f"[probe] no existing file for {base}{extension}")
        return None

    def _candidates(self, base: str):
        yield Path(base)
        for ext in self.extensions:
            yield Path(f"{base}{ext}")
        for ext in self.extensions:
            yield Path(base) / f"index{ext}"

    def __repr__(self) -> str:
        return f"ExtensionProbe({', '.join(self.extensions)})"
