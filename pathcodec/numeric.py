"""
numeric.py - Numeric Parsing Module

Parses integers from user or config supplied strings. Malformed input never
raises: it resolves to a clamped boundary value or to the caller's default.
"""

from functools import lru_cache
from typing import List, Optional, Sequence
import logging
import re

from .checks import check_not_null, check_str, check_that
from .models import CoreOptions, DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Anything other than digits and the minus sign separates list values
_LIST_SEP_RE = re.compile(r"[^-0-9]+")


@lru_cache(maxsize=8)
def _overflow_patterns(min_digits: int) -> tuple:
    """Patterns for positive and negative clampable overflow"""
    return (
        re.compile(rf"[0-9]{{{min_digits},}}"),
        re.compile(rf"-[0-9]{{{min_digits},}}"),
    )


def _bound_digits(options: CoreOptions) -> int:
    """Digit count of the larger bound magnitude"""
    return len(str(max(abs(options.int_min), abs(options.int_max))))


def _parse_token(token: str, options: CoreOptions) -> Optional[int]:
    """
    Parse a single token

    Args:
        token: Text without surrounding whitespace
        options: Integer bounds

    Returns:
        Parsed or clamped value, None if the token is not a number
    """
    if not _INT_RE.fullmatch(token):
        return None

    # More significant digits than either bound means out of range; also
    # keeps huge tokens away from int()'s digit limit
    significant = token.lstrip("+-").lstrip("0")
    if len(significant) <= _bound_digits(options):
        number = int(significant or "0")
        if token.startswith("-"):
            number = -number
        if options.int_min <= number <= options.int_max:
            return number

    positive, negative = _overflow_patterns(options.clamp_digits)
    if positive.fullmatch(token):
        logger.debug("Clamped %s to %d", token, options.int_max)
        return options.int_max
    if negative.fullmatch(token):
        logger.debug("Clamped %s to %d", token, options.int_min)
        return options.int_min
    return None


def to_int(value: str, default: int, options: Optional[CoreOptions] = None) -> int:
    """
    Parse an integer string

    Leading and trailing whitespace is ignored. A number outside the integer
    bounds is clamped to the nearest bound.

    Args:
        value: Text to parse
        default: Returned when the text cannot be parsed
        options: Integer bounds (default: 32-bit)

    Returns:
        Parsed value, clamped value or default
    """
    check_str(value)
    if options is None:
        options = DEFAULT_OPTIONS

    parsed = _parse_token(value.strip(), options)
    if parsed is None:
        logger.debug("Cannot parse %r as integer, using default %r", value, default)
        return default
    return parsed


def to_int_array(
    value: str,
    defaults: Sequence[int],
    options: Optional[CoreOptions] = None
) -> List[int]:
    """
    Split a string into a list of integers

    Any characters other than digits and the minus sign act as separators,
    e.g. "1, 2, 3" -> [1, 2, 3]. Out-of-range numbers are clamped.

    Args:
        value: Text to parse
        defaults: Returned (as a new list) if any value cannot be parsed
        options: Integer bounds (default: 32-bit)

    Returns:
        Parsed values; empty list for blank input
    """
    check_str(value)
    check_not_null(defaults)
    if options is None:
        options = DEFAULT_OPTIONS

    if not value.strip():
        return []

    tokens = _LIST_SEP_RE.split(value)
    # Trailing empty fields are dropped, a leading one is kept
    while tokens and tokens[-1] == "":
        tokens.pop()

    results: List[int] = []
    for token in tokens:
        parsed = _parse_token(token, options)
        if parsed is None:
            logger.debug("Cannot parse %r in %r, using defaults", token, value)
            return list(defaults)
        results.append(parsed)

    return results


def clamp(value: int, minimum: int, maximum: int) -> int:
    """
    Bound value to [minimum, maximum]

    Raises:
        PreconditionError: if minimum > maximum
    """
    check_that(minimum <= maximum, f"Inverted range: {minimum} > {maximum}")
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value
