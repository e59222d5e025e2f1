"""
text_utils.py - Text and Sequence Helpers

Provides joining, line separator conversion and small list helpers
"""

from typing import Any, Iterable, Optional, Sequence

from .checks import check_not_null


def join(separator: str, *parts: Any) -> str:
    """Join str() of each part with separator"""
    return join_iter(separator, parts)


def join_iter(separator: str, parts: Iterable[Any]) -> str:
    """Same as join, but reads the parts from an iterable"""
    check_not_null(separator, parts)
    return separator.join(str(part) for part in parts)


def ensure_linux_line_sep(text: str) -> str:
    """Convert Windows line separators to Linux ones"""
    return check_not_null(text).replace("\r\n", "\n")


def ensure_windows_line_sep(text: str) -> str:
    """Convert Linux line separators to Windows ones"""
    # Two passes, otherwise "\r\n" would become "\r\r\n"
    return check_not_null(text).replace("\r\n", "\n").replace("\n", "\r\n")


def sequence_equals(items: Iterable[Any], array: Sequence[Any]) -> bool:
    """
    Check if items and array have equal elements in the same order

    Args:
        items: Any sized iterable
        array: Sequence to compare against

    Returns:
        Whether equal
    """
    check_not_null(items, array)
    items = list(items)
    if len(items) != len(array):
        return False
    return all(a == b for a, b in zip(items, array))


def contains_equality(objects: Optional[Iterable[Any]], obj: Any) -> bool:
    """Whether objects holds an element equal to obj; False for None"""
    if objects is None:
        return False
    return any(candidate == obj for candidate in objects)


def get_last(items: Optional[Sequence[Any]]) -> Any:
    """Last element, or None for an empty or None sequence"""
    if not items:
        return None
    return items[-1]
