"""
path_utils.py - Path String Utilities

Splitting, joining and comparing slash-delimited path strings. Both forward
and backward slashes are accepted as separators on input; the normalized
form uses forward slashes only.

Two representations of an absolute path are available:
- get_abs_path: normalized, for display and comparison
- get_system_abs_path: native separators, for handing to external programs
"""

from typing import Iterable, List, Tuple
import os

from .checks import check_not_null
from .models import AbsPath

SEPARATORS = "/\\"


def normalize_separators(path) -> str:
    """Replace all backslashes with forward slashes"""
    return str(check_not_null(path)).replace("\\", "/")


def split_path(path: str) -> List[str]:
    """
    Split path at every forward or backward slash

        /path/to/file/ -> '', 'path', 'to', 'file'

    A leading separator produces an empty string at the beginning of the
    list, while a (single) trailing separator does not produce one at the end.
    """
    check_not_null(path)
    path = str(path)

    parts: List[str] = []
    last_start = 0
    for i, c in enumerate(path):
        if c in SEPARATORS:
            parts.append(path[last_start:i])
            last_start = i + 1
    if last_start < len(path):
        parts.append(path[last_start:])
    return parts


def join_path(*parts) -> str:
    """
    Create a file path by joining the given parts

    Leading and trailing slashes are stripped from all parts, except for the
    first part where only trailing slashes are stripped, so a root such as
    "/" or "C:" survives. All backslashes are replaced by forward slashes.
    """
    return join_path_iter(parts)


def join_path_iter(parts: Iterable) -> str:
    """Same as join_path, but reads the parts from an iterable"""
    check_not_null(parts)

    pieces: List[str] = []
    for i, part in enumerate(parts):
        text = str(check_not_null(part))
        if i == 0:
            pieces.append(text.rstrip(SEPARATORS))
        else:
            pieces.append(text.strip(SEPARATORS))
    return "/".join(pieces).replace("\\", "/")


def split_path_last(path: str) -> Tuple[str, str]:
    """
    Split path at the last forward or backward slash

    Returns:
        (head, tail); (path, "") if there is no separator
    """
    check_not_null(path)
    path = str(path)

    index = max(path.rfind("/"), path.rfind("\\"))
    if index == -1:
        return path, ""
    return path[:index], path[index + 1:]


def get_abs_path(path) -> str:
    """Absolute path with all backslashes replaced by forward slashes"""
    return get_system_abs_path(path).replace("\\", "/")


def get_system_abs_path(path) -> str:
    """
    Absolute path with the platform's own separators

    A relative path is only prefixed with the working directory; "." and ".."
    segments are kept as they are.
    """
    check_not_null(path)
    text = os.fspath(path)
    if os.path.isabs(text):
        return text
    if not text:
        return os.getcwd()
    return os.path.join(os.getcwd(), text)


def abs_path(path) -> AbsPath:
    """Absolute path in both normalized and native form"""
    native = get_system_abs_path(path)
    return AbsPath(normalized=native.replace("\\", "/"), native=native)


def get_parent_path(path) -> str:
    """
    Normalized path of the parent directory

    Trailing separators are ignored, so "/x/y/" gives "/x". Unlike
    os.path.dirname, a relative path without separators (e.g. "file.txt")
    resolves to the parent of its absolute form instead of an empty string.
    """
    check_not_null(path)
    text = os.fspath(path)
    # A bare root stays as it is
    text = text.rstrip(SEPARATORS) or text
    parent = os.path.dirname(text)
    if not parent:
        parent = os.path.dirname(get_system_abs_path(text))
    return parent.replace("\\", "/")


def contains(dir_path: str, file_or_dir_path: str) -> bool:
    """
    Check whether dir_path is a direct or indirect parent of file_or_dir_path

    Both paths are compared in normalized form. A path does not contain
    itself, and "/a/b" does not contain "/a/bc".
    """
    dir_path = normalize_separators(dir_path)
    file_or_dir_path = normalize_separators(file_or_dir_path)

    if len(dir_path) >= len(file_or_dir_path):
        return False
    if file_or_dir_path[len(dir_path)] != "/":
        return False
    return file_or_dir_path.startswith(dir_path)


def contains_abs(dir_path, file_or_dir_path) -> bool:
    """Same as contains, after making both paths absolute"""
    return contains(get_abs_path(dir_path), get_abs_path(file_or_dir_path))
