"""
models.py - Core Data Structure Definitions

Contains:
- INT_MIN / INT_MAX: Bounds of the target integer type
- CoreOptions: Options shared by the parsing and codec helpers
- AbsPath: Normalized and native form of an absolute path
- FilenameParts: Base name and extension of a filename
"""

from dataclasses import dataclass
from typing import NamedTuple

from .checks import check_that, check_list_separator


INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

# Sentinel below any real timestamp
NO_TIMESTAMP = -1


@dataclass(frozen=True)
class CoreOptions:
    """Options configuration, validated on creation"""
    # List codec
    list_separator: str = ";"       # Default element separator

    # Numeric parsing
    int_min: int = INT_MIN          # Lower bound for clamping
    int_max: int = INT_MAX          # Upper bound for clamping
    clamp_digits: int = 10          # Minimum digit count of a clampable overflow

    def __post_init__(self):
        self.validate()

    def validate(self) -> "CoreOptions":
        """Check option consistency, return self"""
        check_list_separator(self.list_separator)
        check_that(self.int_min <= self.int_max,
                   f"Inverted integer range: {self.int_min} > {self.int_max}")
        check_that(self.clamp_digits > 0, "clamp_digits must be positive")
        return self


DEFAULT_OPTIONS = CoreOptions()


@dataclass(frozen=True)
class AbsPath:
    """Absolute path in both representations"""
    normalized: str                 # Forward slashes only (display, comparison)
    native: str                     # Platform separators (external processes)

    def __str__(self) -> str:
        return self.normalized


class FilenameParts(NamedTuple):
    """Filename split into base name and extension (without dot)"""
    base: str
    extension: str

    @property
    def has_extension(self) -> bool:
        return bool(self.extension)

    def dotted_extension(self) -> str:
        """Extension with leading dot, or empty string"""
        return "." + self.extension if self.extension else ""
