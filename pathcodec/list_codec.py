"""
list_codec.py - String List Codec

Stores an ordered list of strings (e.g. recently opened files) as a single
configuration value. Occurrences of the separator and of the backslash
inside an element are escaped with a backslash.

    encode_strings(";", ["a;b", "c\\d"])  ->  "a\\;b;c\\\\d"
"""

from typing import Iterable, List

from .checks import check_list_separator, check_not_null, check_str


def encode_strings(sep: str, parts: Iterable[str]) -> str:
    """
    Encode strings into a single string

    Args:
        sep: Single-character separator
        parts: Strings to encode (order is preserved)

    Returns:
        Encoded string; empty string for an empty list

    See also:
        decode_strings
    """
    check_list_separator(sep)
    check_not_null(parts)

    escaped_sep = "\\" + sep
    # Backslashes first, otherwise the separator's escape would be doubled
    return sep.join(
        check_str(part, "part").replace("\\", "\\\\").replace(sep, escaped_sep)
        for part in parts
    )


def decode_strings(sep: str, text: str) -> List[str]:
    """
    Decode a string produced by encode_strings

    Splits at every separator that is not escaped with a backslash. Never
    fails; a dangling backslash at the end is dropped.

    Note that an empty string decodes to [""], not to an empty list. Callers
    that stored an empty list must check for "" before decoding.

    Args:
        sep: Single-character separator
        text: Encoded string

    Returns:
        Decoded strings (at least one element)
    """
    check_list_separator(sep)
    check_str(text, "text")

    parts: List[str] = []
    current: List[str] = []
    escaped = False

    for c in text:
        if escaped:
            current.append(c)
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == sep:
            parts.append("".join(current))
            current = []
        else:
            current.append(c)

    parts.append("".join(current))
    return parts
