import pytest

from clappie.engine.ansi import (
    pad_center,
    pad_right,
    repeat_to_width,
    strip_ansi,
    truncate_to_width,
    visual_width,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello", 5),
        ("", 0),
        ("abc def", 7),
        ("\x1b[31mred\x1b[0m", 3),
        ("\x1b[1m\x1b[38;2;255;0;0mbold red\x1b[0m", 8),
    ],
)
def test_visual_width(text, expected):
    assert visual_width(text) == expected


def test_visual_width_counts_wide_characters_double():
    assert visual_width("日本") == 4


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello", "hello"),
        ("\x1b[31mred\x1b[0m", "red"),
        ("\x1b[1m\x1b[38;2;255;0;0mbold\x1b[0m text", "bold text"),
        ("no codes here", "no codes here"),
    ],
)
def test_strip_ansi(text, expected):
    assert strip_ansi(text) == expected


def test_strip_ansi_removes_osc_sequences():
    assert strip_ansi("a\x1b]0;title\x07b\x1b]8;;x\x1b\\c") == "abc"


@pytest.mark.parametrize(
    "text, max_width",
    [("hello", 10), ("hello world", 8), ("hi", 2)],
)
def test_truncate_to_width_fits(text, max_width):
    result = truncate_to_width(text, max_width, "...")
    assert visual_width(strip_ansi(result)) <= max_width


@pytest.mark.parametrize(
    "text, max_width, expected",
    [("hello", 10, "hello"), ("hello world", 8, "hello..."), ("hi", 2, "hi")],
)
def test_truncate_to_width_values(text, max_width, expected):
    assert truncate_to_width(text, max_width, "...") == expected


def test_truncate_never_splits_wide_character():
    result = truncate_to_width("日本語", 4, "")
    assert result == "日本"


def test_pad_right():
    assert visual_width(pad_right("hi", 10)) == 10
    assert pad_right("hi", 10).startswith("hi")


def test_pad_right_leaves_long_text():
    assert pad_right("hello", 3) == "hello"


def test_pad_center():
    result = pad_center("hi", 10)
    assert visual_width(result) == 10
    assert result.strip() == "hi"


def test_pad_center_puts_extra_space_right():
    result = pad_center("hi", 5)
    assert result.index("hi") == 1
    assert visual_width(result) == 5


def test_repeat_to_width():
    assert repeat_to_width("ab", 5) == "abab"
    assert repeat_to_width("-", 3) == "---"


@pytest.mark.parametrize("ch, width", [("", 5), ("-", 0), ("-", -2)])
def test_repeat_to_width_degenerate(ch, width):
    assert repeat_to_width(ch, width) == ""