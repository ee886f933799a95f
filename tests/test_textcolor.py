import pytest

from barchartrace.textcolor import COLOR_LIST, Color, tcolor


def test_default_colour_and_modifier():
    assert tcolor("hi") == "\x1b[0;37mhi\x1b[0m"


def test_explicit_colour_and_modifier():
    assert tcolor("x", Color.RED, Color.BOLD) == "\x1b[1;31mx\x1b[0m"


@pytest.mark.parametrize("color", COLOR_LIST)
def test_every_listed_colour_is_embedded(color):
    result = tcolor("word", color)
    assert result.startswith("\x1b[0;" + str(int(color)) + "m")
    assert result.endswith("word\x1b[0m")


@pytest.mark.parametrize("msg", ["", "plain", "█", "multi\nline"])
def test_message_is_kept_intact(msg):
    result = tcolor(msg, Color.BRIGHT_YELLOW, Color.UNDERLINE)
    prefix = "\x1b[4;93m"
    assert result[len(prefix):-len("\x1b[0m")] == msg
    assert result.startswith(prefix)


def test_plain_ints_accepted_like_enum_members():
    assert tcolor("a", 34, 1) == tcolor("a", Color.BLUE, Color.BOLD)