"""Error message formatting for the command-line wrapper.

Makes sure every resolution failure is shown with a useful, markup-safe
message, including exceptions whose str() is empty.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

from ..errors import AliasResolutionError
from ..errors import MissingArgumentError


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a non-empty display message.

    Args:
        e: The exception to format
        include_type: Whether to prefix the exception type name

    Returns:
        A non-empty, user-friendly error message

    Examples:
        >>> format_error_message(MissingArgumentError("filename"))
        'Missing argument: filename not given'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'
    """
    if isinstance(e, MissingArgumentError):
        return f"Missing argument: {e}"

    if isinstance(e, AliasResolutionError):
        cause = e.__cause__
        detail = e.message
        if cause is not None and include_type:
            detail = f"{detail} [{type(cause).__name__}]"
        return f"Alias config error in {e.config_path}: {detail}"

    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Paths and loader-plugin references can contain brackets that Rich would
    otherwise read as markup tags.
    """
    return _escape_markup(str(value))
