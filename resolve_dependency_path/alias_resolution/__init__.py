"""Alias resolution - optional rewriting of dependencies before path resolution.

The core resolver only knows the AliasResolver protocol. ConfigAliasResolver is
the bundled implementation, driven by a YAML alias/plugin table.
"""

from .config import ConfigAliasResolver
from .protocol import AliasResolution
from .protocol import AliasResolver
from .schema import AliasConfig
from .schema import LoaderPluginConfig

__all__ = [
    "AliasConfig",
    "AliasResolution",
    "AliasResolver",
    "ConfigAliasResolver",
    "LoaderPluginConfig",
]
