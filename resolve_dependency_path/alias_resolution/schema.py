"""Pydantic models for alias configuration files."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class LoaderPluginConfig(BaseModel):
    """A prefix-form loader plugin (``name!resource``).

    Attributes:
        extension: Extension of the assets the plugin loads (e.g. ".mustache").
            None leaves the resource to normal extension inference.
    """

    model_config = ConfigDict(extra="forbid")

    extension: str | None = None

    @field_validator("extension")
    @classmethod
    def ensure_leading_period(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value or value == ".":
            raise ValueError("extension must not be empty")
        return value if value.startswith(".") else f".{value}"


class AliasConfig(BaseModel):
    """Alias configuration document.

    Example:
        base_dir: src
        paths:
          foobar: b
        plugins:
          hgn:
            extension: .mustache
    """

    model_config = ConfigDict(extra="forbid")

    base_dir: str | None = None
    paths: dict[str, str] = Field(default_factory=dict)
    plugins: dict[str, LoaderPluginConfig] = Field(default_factory=dict)

    @field_validator("paths", mode="before")
    @classmethod
    def allow_empty_paths(cls, value):
        return {} if value is None else value

    @field_validator("plugins", mode="before")
    @classmethod
    def allow_empty_plugin_entries(cls, value):
        # `hgn:` or `plugins:` with nothing after it parses as None
        if value is None:
            return {}
        if isinstance(value, dict):
            return {name: entry if entry is not None else {} for name, entry in value.items()}
        return value

    def lookup_alias(self, dependency: str) -> str | None:
        """Rewrite a dependency through the longest matching ``paths`` key.

        A key matches when it equals the dependency or is a ``/``-delimited
        prefix of it.

        Returns:
            Rewritten dependency, or None if no key matches
        """
        matches = [key for key in self.paths if dependency == key or dependency.startswith(f"{key}/")]
        if not matches:
            return None

        key = max(matches, key=len)
        return self.paths[key] + dependency[len(key) :]
