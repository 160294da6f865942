"""Shared Rich console for CLI error output."""

from rich.console import Console

error_console = Console(stderr=True)

__all__ = ["error_console"]
