"""Regular-expression helpers that report bad patterns as ValueError."""

import re

_TEMPLATE_REF = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))", re.ASCII)


def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"编译正则表达式失败: {exc}") from exc


def match_pattern(pattern: str, text: str) -> bool:
    """True if ``pattern`` matches anywhere in ``text``."""
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"正则表达式匹配失败: {exc}") from exc
    return compiled.search(text) is not None


def find_matches(pattern: str, text: str) -> list[str]:
    """All non-overlapping matches of ``pattern`` in ``text``."""
    return [m.group(0) for m in _compile(pattern).finditer(text)]


def _expand(template: str, match: re.Match) -> str:
    def lookup(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        if name.isdigit():
            index = int(name)
            if index > match.re.groups:
                return ""
            return match.group(index) or ""
        if name in match.re.groupindex:
            return match.group(name) or ""
        return ""

    return _TEMPLATE_REF.sub(lookup, template)


def replace_pattern(pattern: str, replacement: str, text: str) -> str:
    """Replace every match of ``pattern`` in ``text``.

    The replacement may refer to groups as ``$1``, ``$name`` or ``${name}``;
    ``$$`` stands for a literal dollar sign.
    """
    compiled = _compile(pattern)
    return compiled.sub(lambda m: _expand(replacement, m), text)