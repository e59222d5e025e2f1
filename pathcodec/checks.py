"""
checks.py - Precondition Check Module

Argument checks for programmer errors. These fail fast with
PreconditionError instead of being normalized away.
"""

from typing import Any, Optional


class PreconditionError(ValueError):
    """Raised when a caller violates an argument precondition"""


def check_that(condition: Any, message: Optional[str] = None) -> None:
    """
    Raise PreconditionError if condition is false

    Args:
        condition: Condition to check
        message: Error message
    """
    if not condition:
        raise PreconditionError(message or "Precondition violated")


def check_not_null(*values: Any) -> Any:
    """
    Raise PreconditionError if any of the given values is None

    A bool argument is rejected as well: passing one almost always means
    check_that was intended.

    Args:
        values: Values to check

    Returns:
        The value itself when called with exactly one argument, else None
    """
    for i, value in enumerate(values):
        if isinstance(value, bool):
            raise PreconditionError(
                f"check_not_null called with a bool at position {i}, use check_that"
            )
        if value is None:
            raise PreconditionError(f"Argument at position {i} must not be None")
    if len(values) == 1:
        return values[0]
    return None


def check_single_char(sep: Any) -> str:
    """
    Check that sep is a one-character string

    Returns:
        The separator
    """
    if not isinstance(sep, str) or len(sep) != 1:
        raise PreconditionError(f"Separator must be a single character, got {sep!r}")
    return sep


def check_str(value: Any, name: str = "value") -> str:
    """Check that value is a str, return it"""
    if value is None:
        raise PreconditionError(f"{name} must not be None")
    if not isinstance(value, str):
        raise PreconditionError(f"{name} must be a str, got {type(value).__name__}")
    return value


def check_list_separator(sep: Any) -> str:
    """Check that sep can delimit encoded list elements"""
    check_single_char(sep)
    if sep == "\\":
        raise PreconditionError("Backslash is the escape character and cannot be a separator")
    return sep
