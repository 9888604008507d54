"""Validation of file names and paths."""

import os

_INVALID_FILENAME_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")
_MAX_PATH_LENGTH = 260


def is_valid_filename(filename: str) -> bool:
    """True if ``filename`` is non-empty, has no reserved characters and
    neither starts nor ends with a dot or space."""
    if not filename:
        return False
    if any(char in filename for char in _INVALID_FILENAME_CHARS):
        return False
    if filename[0] in ". " or filename[-1] in ". ":
        return False
    return True


def is_valid_path(path: str) -> bool:
    """True if ``path`` is non-empty, at most 260 characters and has no NUL."""
    if not path:
        return False
    if len(path) > _MAX_PATH_LENGTH:
        return False
    return "\x00" not in path


def _clean(path: str) -> str:
    cleaned = os.path.normpath(path) if path else "."
    if os.name != "nt" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _join(*parts: str) -> str:
    present = [part for part in parts if part]
    if not present:
        return ""
    return _clean(os.sep.join(present))


def safe_path_join(base: str, elem: str) -> str:
    """Join ``elem`` onto ``base``, refusing anything that could leave ``base``."""
    if ".." in elem:
        raise ValueError(f"路径包含非法字符: {elem}")
    joined = _join(base, elem)
    if not _clean(joined).startswith(_clean(base)):
        raise ValueError("路径超出基础目录范围")
    return joined