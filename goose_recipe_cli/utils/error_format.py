"""Error message formatting for terminal output.

Recipe errors already carry full context (paths searched, underlying OS
error), so they are shown verbatim. Other exceptions fall back to their type
name when str() is empty.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

from ..recipes import RecipeError


def format_error_message(e: BaseException) -> str:
    """Format an exception into a non-empty display message.

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(TimeoutError())
        'TimeoutError: (no additional details)'
    """
    error_str = str(e)
    if isinstance(e, RecipeError) and error_str:
        return error_str

    error_type = type(e).__name__
    if error_str:
        return f"{error_type}: {error_str}"
    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Recipe paths and template errors contain brackets ({{ }}, [..]) that Rich
    would otherwise treat as markup.
    """
    return _escape_markup(str(value))
