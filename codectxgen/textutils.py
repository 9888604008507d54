"""String padding, truncation and line handling helpers."""

import os
from collections.abc import Iterable


def truncate_string(s: str, max_length: int) -> str:
    """Shorten ``s`` to ``max_length`` characters, ending with '...' when room allows."""
    if len(s) <= max_length:
        return s
    if max_length < 0:
        raise ValueError(f"negative length: {max_length}")
    if max_length <= 3:
        return s[:max_length]
    return s[: max_length - 3] + "..."


def pad_string(s: str, length: int, pad_char: str) -> str:
    """Pad ``s`` on the right with ``pad_char`` up to ``length``."""
    if len(s) >= length:
        return s
    return s + pad_char * (length - len(s))


def pad_left(s: str, length: int, pad_char: str) -> str:
    """Pad ``s`` on the left with ``pad_char`` up to ``length``."""
    if len(s) >= length:
        return s
    return pad_char * (length - len(s)) + s


def pad_center(s: str, length: int, pad_char: str) -> str:
    """Centre ``s`` within ``length``; any odd padding goes to the right."""
    if len(s) >= length:
        return s
    total = length - len(s)
    left = total // 2
    return pad_char * left + s + pad_char * (total - left)


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Return the items without repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def split_lines(s: str) -> list[str]:
    """Split on LF or CRLF line breaks."""
    return s.replace("\r\n", "\n").split("\n")


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with LF."""
    return "\n".join(lines)


def count_lines(s: str) -> int:
    """Number of lines as produced by :func:`split_lines`."""
    return len(split_lines(s))


def _on_windows() -> bool:
    return os.name == "nt"


def normalize_line_endings(text: str) -> str:
    """Convert line breaks to the convention of the running platform.

    On Windows every break becomes CRLF; elsewhere CRLF becomes LF and
    stray carriage returns are removed.
    """
    text = text.replace("\r\n", "\n")
    if _on_windows():
        return text.replace("\n", "\r\n")
    return text.replace("\r", "")


def normalize_line_endings_bytes(data: bytes) -> bytes:
    """Byte-level counterpart of :func:`normalize_line_endings`."""
    data = bytes(data).replace(b"\r\n", b"\n")
    if _on_windows():
        return data.replace(b"\n", b"\r\n")
    return data.replace(b"\r", b"")