import pytest

from barchartrace.strutil import (
    amount_of_digits_int,
    interpolate_ap,
    is_equal_to_in_vector,
    ltrim,
    rtrim,
    split,
    strtolower,
)

SAMPLES = ["", ",", "a", "a,b", "a,,b", ",a", "a,b,", ",,", "2021,Name,x,10,cat"]


def test_strtolower_ascii():
    assert strtolower("HeLLo") == "hello"


def test_strtolower_leaves_non_ascii():
    assert strtolower("ÀB") == "Àb"


def test_strtolower_idempotent():
    text = "MiXeD Case 123"
    assert strtolower(strtolower(text)) == strtolower(text)


def test_split_default_whitespace():
    assert split("a b  c") == ["a", "b", "c"]


@pytest.mark.parametrize("text", SAMPLES)
def test_split_keeping_empties_round_trips(text):
    assert ",".join(split(text, ",", False)) == text


@pytest.mark.parametrize("text", SAMPLES + ["  lots \t of   space  "])
def test_split_removing_empties_invariants(text):
    delims = ", \t"
    parts = split(text, delims)
    assert all(parts)
    assert all(not any(d in p for d in delims) for p in parts)
    assert "".join(parts) == "".join(ch for ch in text if ch not in delims)


def test_split_only_delimiters_gives_nothing():
    assert split(" \t  ") == []


def test_split_empty_delimiters_keeps_whole_text():
    assert split("abc", "") == ["abc"]


@pytest.mark.parametrize("text", ["", "   ", " \t x y \t", "x", "\tabc  "])
def test_ltrim_invariants(text):
    result = ltrim(text)
    assert text.endswith(result)
    assert result[:1] not in (" ", "\t") or result == ""
    assert ltrim(result) == result


@pytest.mark.parametrize("text", ["", "   ", " \t x y \t", "x", "\tabc  "])
def test_rtrim_invariants(text):
    result = rtrim(text)
    assert text.startswith(result)
    assert result[-1:] not in (" ", "\t") or result == ""
    assert rtrim(result) == result


def test_trim_all_delimiters_gives_empty():
    assert rtrim("  \t") == ""
    assert ltrim("  \t") == ""


def test_trim_custom_delimiters():
    assert ltrim(rtrim("==key==", "="), "=") == "key"


@pytest.mark.parametrize(
    "first,last,middle",
    [(0, 10, 3), (0, 50, 3), (10, 50, 0), (5, 5, 2), (0, 100, 4)],
)
def test_interpolate_ap_ends_and_length(first, last, middle):
    result = interpolate_ap(first, last, middle)
    assert len(result) == middle + 2
    assert result[0] == first
    assert result[-1] == last
    assert result == sorted(result)


def test_interpolate_ap_rejects_negative_terms():
    with pytest.raises(ValueError):
        interpolate_ap(0, 10, -1)


@pytest.mark.parametrize("value", [1, 9, 10, 99, 100, 123456])
def test_amount_of_digits_matches_decimal_text(value):
    assert amount_of_digits_int(value) == len(str(value))


def test_amount_of_digits_zero():
    assert amount_of_digits_int(0) == 1


def test_is_equal_to_in_vector_respects_limit():
    places = [1, 5, 9]
    assert is_equal_to_in_vector(5, places, 1) is False
    assert is_equal_to_in_vector(5, places, 2) is True
    assert is_equal_to_in_vector(9, places, 3) is True
    assert is_equal_to_in_vector(4, places, 3) is False
    assert is_equal_to_in_vector(1, places, 0) is False