import pytest

from codectxgen.colors import (
    Color,
    colorize,
    error_color,
    info_color,
    success_color,
    warning_color,
)


def test_colorize_contains_parts():
    colored = colorize("test", Color.RED)
    assert Color.RED.value in colored
    assert Color.RESET.value in colored
    assert "test" in colored


def test_colorize_exact_value():
    assert colorize("test", Color.RED) == "\033[31mtest\033[0m"


def test_colorize_accepts_raw_code():
    assert colorize("x", "\033[36m") == "\033[36mx\033[0m"


@pytest.mark.parametrize(
    "func, color",
    [
        (error_color, Color.RED),
        (success_color, Color.GREEN),
        (warning_color, Color.YELLOW),
        (info_color, Color.BLUE),
    ],
)
def test_named_colors(func, color):
    result = func("message")
    assert result.startswith(color.value)
    assert result.endswith(Color.RESET.value)
    assert "message" in result


def test_unknown_color_rejected():
    with pytest.raises(ValueError):
        colorize("x", "not-a-colour")