"""Tests for CLI error message formatting."""

from pathlib import Path

from resolve_dependency_path.errors import AliasResolutionError
from resolve_dependency_path.errors import MissingArgumentError
from resolve_dependency_path.utils.error_format import escape_markup
from resolve_dependency_path.utils.error_format import format_error_message


def test_missing_argument():
    assert format_error_message(MissingArgumentError("directory")) == "Missing argument: directory not given"


def test_alias_error_names_config_and_cause():
    try:
        try:
            raise FileNotFoundError(2, "No such file or directory")
        except FileNotFoundError as cause:
            raise AliasResolutionError(Path("/proj/aliases.yaml"), "Cannot read alias config") from cause
    except AliasResolutionError as e:
        message = format_error_message(e)

    assert message.startswith("Alias config error in ")
    assert "aliases.yaml" in message
    assert "Cannot read alias config" in message
    assert "[FileNotFoundError]" in message


def test_generic_error_includes_type():
    assert format_error_message(ValueError("bad input")) == "ValueError: bad input"
    assert format_error_message(ValueError("bad input"), include_type=False) == "bad input"


def test_empty_message_is_never_empty():
    assert format_error_message(TimeoutError()) == "TimeoutError: (no additional details)"


def test_escape_markup():
    assert escape_markup("[red]hgn!templates[/red]") == "\\[red]hgn!templates\\[/red]"
