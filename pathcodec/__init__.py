"""
pathcodec - Text and Path Helper Library

Provides list encoding, path normalization, filename parsing, integer
parsing and unique timestamps.
"""

from .checks import (
    PreconditionError,
    check_that,
    check_not_null,
)

from .models import (
    INT_MIN,
    INT_MAX,
    CoreOptions,
    AbsPath,
    FilenameParts,
)

from .numeric import (
    to_int,
    to_int_array,
    clamp,
)

from .list_codec import (
    encode_strings,
    decode_strings,
)

from .path_utils import (
    split_path,
    join_path,
    join_path_iter,
    split_path_last,
    normalize_separators,
    get_abs_path,
    get_system_abs_path,
    abs_path,
    get_parent_path,
    contains,
    contains_abs,
)

from .filename import (
    split_filename,
    get_extension,
    has_extension,
)

from .timestamp import (
    TimestampGenerator,
    default_generator,
    get_timestamp,
)

from .text_utils import (
    join,
    join_iter,
    ensure_linux_line_sep,
    ensure_windows_line_sep,
    sequence_equals,
    contains_equality,
    get_last,
)

__all__ = [
    # Data models
    "INT_MIN",
    "INT_MAX",
    "CoreOptions",
    "AbsPath",
    "FilenameParts",

    # Preconditions
    "PreconditionError",
    "check_that",
    "check_not_null",

    # Numeric parsing
    "to_int",
    "to_int_array",
    "clamp",

    # List codec
    "encode_strings",
    "decode_strings",

    # Paths
    "split_path",
    "join_path",
    "join_path_iter",
    "split_path_last",
    "normalize_separators",
    "get_abs_path",
    "get_system_abs_path",
    "abs_path",
    "get_parent_path",
    "contains",
    "contains_abs",

    # Filenames
    "split_filename",
    "get_extension",
    "has_extension",

    # Timestamps
    "TimestampGenerator",
    "default_generator",
    "get_timestamp",

    # Text helpers
    "join",
    "join_iter",
    "ensure_linux_line_sep",
    "ensure_windows_line_sep",
    "sequence_equals",
    "contains_equality",
    "get_last",
]
