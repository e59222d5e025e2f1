from __future__ import annotations

import pytest

from pathcodec import FilenameParts, PreconditionError, get_extension, has_extension, split_filename


@pytest.mark.parametrize(
    "name, expected",
    [
        ("data.xml", ("data", "xml")),
        ("README", ("README", "")),
        ("archive.tar.gz", ("archive", "tar.gz")),
        ("abiword.abw.gz", ("abiword", "abw.gz")),
        ("ARCHIVE.TAR.GZ", ("ARCHIVE", "tar.gz")),
        ("a.b.Gz", ("a", "b.gz")),
        ("file.gz", ("file", "gz")),
        (".gz", ("", "gz")),
        ("Photo.JPG", ("Photo", "jpg")),
        ("name.", ("name", "")),
        (".bashrc", ("", "bashrc")),
        ("/dir.v2/file.tar.gz", ("/dir.v2/file", "tar.gz")),
        ("/dir.v2/file", ("/dir", "v2/file")),
    ],
)
def test_split_filename(name: str, expected: tuple) -> None:
    parts = split_filename(name)
    assert isinstance(parts, FilenameParts)
    assert parts == expected


def test_split_filename_unpacks_into_base_and_extension() -> None:
    base, ext = split_filename("report.PDF")
    assert base == "report"
    assert ext == "pdf"
    assert split_filename("report.PDF").dotted_extension() == ".pdf"
    assert split_filename("README").dotted_extension() == ""
    assert not split_filename("README").has_extension


def test_get_extension() -> None:
    assert get_extension("archive.tar.gz") == "tar.gz"
    assert get_extension("README") == ""


@pytest.mark.parametrize(
    "name, extensions, expected",
    [
        ("some_file.TXT", ("txt",), True),
        ("notes.md", ("txt", "MD"), True),
        ("archive.tar.gz", ("gz",), True),
        ("archive.tar.gz", ("tar.gz",), True),
        ("txt", ("txt",), False),
        ("file.txt", ("doc", "pdf"), False),
        ("file.txt", (), False),
        ("/some/dir/file.html", ("html",), True),
    ],
)
def test_has_extension(name: str, extensions: tuple, expected: bool) -> None:
    assert has_extension(name, *extensions) is expected


def test_has_extension_accepts_a_collection() -> None:
    assert has_extension("x.txt", ["doc", "TXT"])
    assert has_extension("x.txt", {"txt"})
    assert not has_extension("x.txt", [])


def test_none_filename_is_rejected() -> None:
    with pytest.raises(PreconditionError):
        split_filename(None)  # type: ignore[arg-type]
    with pytest.raises(PreconditionError):
        has_extension(None, "txt")  # type: ignore[arg-type]
