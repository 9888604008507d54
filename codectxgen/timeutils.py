"""Duration, timestamp and file-size formatting helpers."""

import re
from datetime import date, datetime, timedelta, timezone

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_SIMPLE_FORMATS = [
    (re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"), "%Y-%m-%d %H:%M:%S"),
    (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d"),
    (re.compile(r"\d{2}:\d{2}:\d{2}"), "%H:%M:%S"),
    (re.compile(r"\d{4}/\d{2}/\d{2}"), "%Y/%m/%d"),
]

_SIZE_UNITS = ["KB", "MB", "GB", "TB", "PB"]


def format_duration(d: timedelta) -> str:
    """Render a duration in seconds, minutes or hours with one decimal."""
    seconds = d.total_seconds()
    if d < timedelta(minutes=1):
        return f"{seconds:.1f}s"
    if d < timedelta(hours=1):
        return f"{seconds / 60:.1f}m"
    return f"{seconds / 3600:.1f}h"


def _parse_rfc3339(text: str) -> datetime:
    m = _RFC3339.fullmatch(text)
    if m is None:
        raise ValueError(text)
    base = datetime.strptime(f"{m[1]} {m[2]}", "%Y-%m-%d %H:%M:%S")
    micro = int((m[3] or "0")[:6].ljust(6, "0"))
    zone = m[4]
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    return base.replace(microsecond=micro, tzinfo=tz)


def _parse_simple(text: str) -> datetime:
    for pattern, fmt in _SIMPLE_FORMATS:
        if not pattern.fullmatch(text):
            continue
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if fmt == "%H:%M:%S":
            parsed = datetime.combine(date.min, parsed.time())
        return parsed.replace(tzinfo=timezone.utc)
    raise ValueError(text)


def parse_time(time_str: str) -> datetime:
    """Parse a timestamp in one of the supported layouts.

    Accepted: RFC 3339, ``YYYY-MM-DD HH:MM:SS``, ``YYYY-MM-DD``,
    ``HH:MM:SS`` (on the earliest representable date) and ``YYYY/MM/DD``.
    Values without a zone are taken as UTC.
    """
    for parser in (_parse_rfc3339, _parse_simple):
        try:
            return parser(time_str)
        except ValueError:
            continue
    raise ValueError(f"无法解析时间字符串: {time_str}")


def format_file_size(size: int) -> str:
    """Render a byte count with binary units (B, KB, MB, ...)."""
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    if exp >= len(_SIZE_UNITS):
        raise ValueError(f"size too large to format: {size}")
    return f"{size / div:.1f} {_SIZE_UNITS[exp]}"