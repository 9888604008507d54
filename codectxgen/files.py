"""File inspection and encoding-aware reading."""

import hashlib
import os
from datetime import datetime

from .charsets import convert_to_utf8, detect_encoding

_TEXT_EXTENSIONS = frozenset(
    {
        ".txt", ".md", ".json", ".xml", ".yaml", ".yml", ".toml",
        ".go", ".py", ".js", ".ts", ".java", ".cpp", ".c", ".h",
        ".html", ".css", ".scss", ".sass", ".sql", ".sh", ".bat",
        ".ps1", ".rb", ".php", ".rs", ".swift", ".kt", ".scala",
    }
)

_SNIFF_SIZE = 512
_BINARY_PLACEHOLDER = "[二进制文件]"


def _extension(path: str) -> str:
    """Suffix from the last dot of the final path element, dot included."""
    separators = {os.sep, os.altsep} - {None}
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char in separators:
            break
        if char == ".":
            return path[index:]
    return ""


def file_exists(path: str) -> bool:
    """True unless ``path`` is known not to exist."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def directory_exists(path: str) -> bool:
    """True if ``path`` exists and is a directory."""
    try:
        return os.path.isdir(path) and os.stat(path) is not None
    except OSError:
        return False


def get_file_hash(path: str) -> str:
    """Hex MD5 digest of the file's contents."""
    digest = hashlib.md5()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def get_file_size(path: str) -> int:
    """Size of the file in bytes."""
    return os.stat(path).st_size


def get_file_mod_time(path: str) -> datetime:
    """Last modification time as an aware local datetime."""
    return datetime.fromtimestamp(os.stat(path).st_mtime).astimezone()


def _looks_like_text(path: str) -> bool:
    try:
        with open(path, "rb") as handle:
            head = handle.read(_SNIFF_SIZE)
    except OSError:
        return False
    if not head or 0 in head:
        return False
    printable = sum(1 for b in head if 32 <= b <= 126 or b in (9, 10, 13))
    return printable / len(head) > 0.8


def is_text_file(path: str) -> bool:
    """True for known text extensions, or for extensionless files whose
    first bytes hold no NUL and are mostly printable ASCII."""
    ext = _extension(path).lower()
    if ext in _TEXT_EXTENSIONS:
        return True
    if ext == "":
        return _looks_like_text(path)
    return False


def is_binary_file(path: str) -> bool:
    """Opposite of :func:`is_text_file`."""
    return not is_text_file(path)


def read_file_content(path: str, max_size: int) -> tuple[str, bool]:
    """Read a file as text; see :func:`read_file_content_with_encoding`."""
    return read_file_content_with_encoding(path, max_size)


def read_file_content_with_encoding(path: str, max_size: int) -> tuple[str, bool]:
    """Read a file, detecting its encoding, and return ``(text, is_binary)``.

    A positive ``max_size`` limits the file size; larger files raise
    ValueError. Binary files yield a placeholder text.
    """
    size = os.stat(path).st_size
    if max_size > 0 and size > max_size:
        raise ValueError(f"文件大小超过限制: {size} > {max_size}")

    with open(path, "rb") as handle:
        content = handle.read()

    if not is_text_file(path):
        return _BINARY_PLACEHOLDER, True

    encoding, clean = detect_encoding(content)
    return convert_to_utf8(clean, encoding), False