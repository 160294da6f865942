"""YAML-driven alias resolver.

Reads an alias configuration (see AliasConfig) on every call and rewrites
dependencies through it:

- ``plugin!resource`` with a known plugin: the prefix is dropped and the
  plugin's declared extension is applied (``hgn!templates/a`` ->
  ``<directory>/templates/a.mustache``).
- ``paths`` aliases: ``foobar`` -> ``b``, ``vendor/jquery`` -> ``third_party/vendor/jquery``.
- ``base_dir``: rooted dependencies are placed under it.

Relative dependencies (``./x``) are never aliased; they only ever refer to
files next to the referencing file.
"""

import logging
import os
import posixpath
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..base import is_relative
from ..errors import AliasResolutionError
from ..loader_plugins import split_loader_prefix
from .protocol import AliasResolution
from .schema import AliasConfig
from .schema import LoaderPluginConfig

logger = logging.getLogger(__name__)


class ConfigAliasResolver:
    """Alias resolver backed by a YAML configuration file.

    Missing, unreadable or invalid configuration raises AliasResolutionError;
    it is never treated as an empty table.
    """

    def __init__(self, config_path: str | Path):
        """Initialize resolver.

        Args:
            config_path: Path to the YAML config. Relative paths are taken
                relative to the project root passed to resolve().
        """
        self.config_path = Path(config_path)

    def resolve(self, dependency: str, directory: str) -> AliasResolution:
        """Rewrite a dependency through the alias configuration.

        Args:
            dependency: Dependency reference as written in source
            directory: Project root

        Returns:
            AliasResolution with the rewritten (or unchanged) dependency

        Raises:
            AliasResolutionError: Config missing, unparseable or invalid
        """
        config = self.load_config(directory)

        plugin, resource = split_loader_prefix(dependency)
        if plugin is not None:
            if plugin not in config.plugins:
                logger.debug(f"[alias] {dependency}: unknown loader plugin '{plugin}', leaving unchanged")
                return AliasResolution(dependency)
            return self._resolve_plugin(config, config.plugins[plugin], resource, directory)

        rewritten = self._rewrite(config, dependency)
        if rewritten != dependency:
            logger.debug(f"[alias] {dependency} -> {rewritten}")
        return AliasResolution(rewritten)

    def load_config(self, directory: str) -> AliasConfig:
        """Read and validate the alias configuration.

        Args:
            directory: Project root, used to locate a relative config path

        Returns:
            Parsed AliasConfig (an empty document gives an empty config)

        Raises:
            AliasResolutionError: File cannot be read, is not valid YAML, or
                does not match the AliasConfig schema
        """
        config_path = self.config_path
        if not config_path.is_absolute():
            config_path = Path(directory) / config_path

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise AliasResolutionError(config_path, f"Cannot read alias config: {e.strerror or e}") from e
        except yaml.YAMLError as e:
            raise AliasResolutionError(config_path, f"Invalid YAML in alias config: {e}") from e

        if data is None:
            return AliasConfig()

        if not isinstance(data, dict):
            raise AliasResolutionError(config_path, f"Alias config must be a mapping, got {type(data).__name__}")

        try:
            return AliasConfig.model_validate(data)
        except ValidationError as e:
            raise AliasResolutionError(config_path, f"Invalid alias config: {e}") from e

    def _rewrite(self, config: AliasConfig, dependency: str) -> str:
        """Apply ``paths`` aliases and ``base_dir`` to a rooted dependency."""
        if is_relative(dependency) or os.path.isabs(dependency):
            return dependency

        target = config.lookup_alias(dependency)
        if target is not None:
            dependency = target

        # An alias may point at a relative or absolute location
        if is_relative(dependency) or os.path.isabs(dependency):
            return dependency

        if config.base_dir:
            return posixpath.join(config.base_dir, dependency)
        return dependency

    def _resolve_plugin(
        self,
        config: AliasConfig,
        plugin_config: LoaderPluginConfig,
        resource: str,
        directory: str,
    ) -> AliasResolution:
        """Resolve the resource part of a ``plugin!resource`` reference."""
        resource = self._rewrite(config, resource)

        extension = plugin_config.extension
        if extension is None:
            if not os.path.splitext(resource)[1]:
                return AliasResolution(resource)
            # Resource already carries its extension
        elif not resource.endswith(extension):
            resource = f"{resource}{extension}"

        if is_relative(resource):
            # Only the core knows the referencing file
            return AliasResolution(resource, extension_resolved=True)

        resolved = os.path.abspath(os.path.join(directory, resource))
        logger.debug(f"[alias] plugin resource {resource} -> {resolved}")
        return AliasResolution(resolved, extension_resolved=True)

    def __repr__(self) -> str:
        return f"ConfigAliasResolver({str(self.config_path)!r})"
