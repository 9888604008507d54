"""ANSI colour helpers for terminal output."""

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences for the basic terminal colours."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"


def colorize(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape sequence of ``color`` followed by a reset."""
    return f"{Color(color).value}{text}{Color.RESET.value}"


def error_color(text: str) -> str:
    """Colour ``text`` red."""
    return colorize(text, Color.RED)


def success_color(text: str) -> str:
    """Colour ``text`` green."""
    return colorize(text, Color.GREEN)


def warning_color(text: str) -> str:
    """Colour ``text`` yellow."""
    return colorize(text, Color.YELLOW)


def info_color(text: str) -> str:
    """Colour ``text`` blue."""
    return colorize(text, Color.BLUE)