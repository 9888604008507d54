import pytest

from codectxgen.regexutils import find_matches, match_pattern, replace_pattern


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("hello", "hello world", True),
        ("world", "hello world", True),
        ("^hello", "hello world", True),
        ("world$", "hello world", True),
        ("xyz", "hello world", False),
    ],
)
def test_match_pattern(pattern, text, expected):
    assert match_pattern(pattern, text) is expected


def test_match_pattern_invalid():
    with pytest.raises(ValueError):
        match_pattern("[", "hello")


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("l", "hello world", ["l", "l", "l"]),
        ("o", "hello world", ["o", "o"]),
        ("xyz", "hello world", []),
        (r"(h)e", "hehe", ["he", "he"]),
    ],
)
def test_find_matches(pattern, text, expected):
    assert find_matches(pattern, text) == expected


def test_find_matches_invalid():
    with pytest.raises(ValueError):
        find_matches("[", "hello")


@pytest.mark.parametrize(
    "pattern, replacement, text, expected",
    [
        ("world", "Go", "hello world", "hello Go"),
        ("l", "L", "hello", "heLLo"),
        ("xyz", "ABC", "hello world", "hello world"),
    ],
)
def test_replace_pattern(pattern, replacement, text, expected):
    assert replace_pattern(pattern, replacement, text) == expected


def test_replace_pattern_invalid():
    with pytest.raises(ValueError):
        replace_pattern("[", "X", "hello")


@pytest.mark.parametrize(
    "pattern, replacement, text, expected",
    [
        ("(a)(b)", "$2$1", "ab", "ba"),
        ("(a)", "${1}x", "a", "ax"),
        ("(?P<word>b)", "<$word>", "abc", "a<b>c"),
        ("a", "$$", "a", "$"),
        ("(a)", "$1x", "a", ""),
        ("a", "\\1", "a", "\\1"),
    ],
)
def test_replace_pattern_template(pattern, replacement, text, expected):
    assert replace_pattern(pattern, replacement, text) == expected