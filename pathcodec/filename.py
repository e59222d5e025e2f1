"""
filename.py - Filename and Extension Parsing

Also accepts file paths; only the position of the dots matters.
"""

from typing import Iterable, Union

from .checks import check_not_null
from .models import FilenameParts

# Extensions that combine with the preceding one, e.g. "tar.gz"
COMPOUND_SUFFIXES = ("gz",)


def split_filename(name: str) -> FilenameParts:
    """
    Split filename into base name and extension, omitting the dot

        "data.xml"       -> ("data", "xml")
        "README"         -> ("README", "")
        "archive.tar.gz" -> ("archive", "tar.gz")
        "abiword.abw.gz" -> ("abiword", "abw.gz")

    The returned extension is always lowercase.
    """
    check_not_null(name)
    name = str(name)

    index = name.rfind(".")
    if index == -1:
        return FilenameParts(name, "")

    ext = name[index + 1:].lower()
    if ext in COMPOUND_SUFFIXES:
        index2 = name.rfind(".", 0, index)
        if index2 != -1:
            return FilenameParts(name[:index2], name[index2 + 1:].lower())

    return FilenameParts(name[:index], ext)


def get_extension(name: str) -> str:
    return split_filename(name).extension


def has_extension(name: str, *extensions: Union[str, Iterable[str]]) -> bool:
    """
    Check whether the filename ends with '.' plus any of the extensions

    Case-insensitive: 'some_file.TXT' matches 'txt'. The extensions can be
    given as separate arguments or as a single iterable.
    """
    check_not_null(name)
    if len(extensions) == 1 and not isinstance(extensions[0], str):
        extensions = tuple(extensions[0])

    lowered = str(name).lower()
    for ext in extensions:
        if lowered.endswith("." + ext.lower()):
            return True
    return False
