import os

import pytest

from codectxgen.validation import is_valid_filename, is_valid_path, safe_path_join


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("valid.txt", True),
        ("file-name_123.go", True),
        ("", False),
        ("file/name.txt", False),
        ("file\\name.txt", False),
        ("file:name.txt", False),
        ("file*name.txt", False),
        ("file?name.txt", False),
        ('file"name.txt', False),
        ("file<name.txt", False),
        ("file>name.txt", False),
        ("file|name.txt", False),
        (".hidden", False),
        ("file.", False),
        (" file.txt", False),
        ("file.txt ", False),
    ],
)
def test_is_valid_filename(filename, expected):
    assert is_valid_filename(filename) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/valid/path", True),
        ("relative/path", True),
        ("", False),
        ("a" * 300, False),
        ("path\x00withnull", False),
        ("a" * 260, True),
    ],
)
def test_is_valid_path(path, expected):
    assert is_valid_path(path) is expected


@pytest.mark.parametrize(
    "base, elem, expected",
    [
        ("/base", "file.txt", os.path.normpath("/base/file.txt")),
        ("/base", "subdir/file.txt", os.path.normpath("/base/subdir/file.txt")),
        ("/base", "", os.path.normpath("/base")),
    ],
)
def test_safe_path_join(base, elem, expected):
    assert safe_path_join(base, elem) == expected


@pytest.mark.parametrize("elem", ["../file.txt", "subdir/../file.txt"])
def test_safe_path_join_rejects_traversal(elem):
    with pytest.raises(ValueError):
        safe_path_join("/base", elem)