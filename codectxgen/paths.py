"""Lexical path helpers."""

import os
from collections.abc import Iterable


def _clean(path: str) -> str:
    cleaned = os.path.normpath(path) if path else "."
    if os.name != "nt" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dir(path: str) -> str:
    return _clean(os.path.dirname(path))


def _parts(path: str) -> list[str]:
    return [part for part in path.split(os.sep) if part and part != "."]


def normalize_path(path: str) -> str:
    """Lexically clean ``path``: collapse separators, '.' and '..'."""
    return _clean(path)


def get_relative_path(base: str, target: str) -> str:
    """Path of ``target`` relative to ``base``, computed lexically.

    Raises ValueError when one path is absolute and the other is not, when
    they lie on different drives, or when ``base`` climbs above a point
    that cannot be known without the file system.
    """
    base_clean = _clean(base)
    targ_clean = _clean(target)
    if os.path.normcase(base_clean) == os.path.normcase(targ_clean):
        return "."
    base_drive, base_rest = os.path.splitdrive(base_clean)
    targ_drive, targ_rest = os.path.splitdrive(targ_clean)
    if os.path.isabs(base_clean) != os.path.isabs(targ_clean) or (
        base_drive.lower() != targ_drive.lower()
    ):
        raise ValueError(f"can't make {target} relative to {base}")

    base_parts = _parts(base_rest)
    targ_parts = _parts(targ_rest)
    common = 0
    for b, t in zip(base_parts, targ_parts):
        if os.path.normcase(b) != os.path.normcase(t):
            break
        common += 1
    remaining = base_parts[common:]
    if remaining and remaining[0] == "..":
        raise ValueError(f"can't make {target} relative to {base}")
    result = [".."] * len(remaining) + targ_parts[common:]
    return os.sep.join(result) if result else "."


def get_absolute_path(path: str) -> str:
    """Absolute, cleaned form of ``path`` based on the working directory."""
    return _clean(os.path.abspath(path))


def is_sub_path(parent: str, child: str) -> bool:
    """True if ``child`` lies strictly inside ``parent``."""
    try:
        rel = get_relative_path(parent, child)
    except ValueError:
        return False
    if rel in (".", ""):
        return False
    return not rel.startswith("..")


def get_common_path(paths: Iterable[str]) -> str:
    """Longest shared leading directory of ``paths``.

    A single path yields its parent directory; no paths yield ''.
    """
    paths = list(paths)
    if not paths:
        return ""
    if len(paths) == 1:
        return _dir(paths[0])

    absolute = [_clean(os.path.abspath(p)) for p in paths]
    candidate = min(absolute, key=len)
    keyed = [os.path.normcase(p) for p in absolute]
    while True:
        prefix = os.path.normcase(candidate)
        if all(p.startswith(prefix) for p in keyed):
            return candidate
        parent = _dir(candidate)
        if parent == candidate:
            return ""
        candidate = parent