"""Small string and number helpers used by the chart renderer."""

import string
import struct

__all__ = [
    "strtolower",
    "split",
    "ltrim",
    "rtrim",
    "interpolate_ap",
    "amount_of_digits_int",
    "is_equal_to_in_vector",
]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _f32(value: float) -> float:
    """Round *value* to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def strtolower(text: str) -> str:
    """Return *text* with ASCII letters lowercased; other characters unchanged."""
    return text.translate(_ASCII_LOWER)


def split(text: str, delimiters: str = " \t", remove_empty: bool = True) -> list[str]:
    """Split *text* on any character in *delimiters*.

    With *remove_empty* false, empty fields between or after delimiters are kept.
    """
    parts: list[str] = []
    current: list[str] = []
    last = len(text) - 1
    for pos, ch in enumerate(text):
        if ch not in delimiters:
            current.append(ch)
            if pos == last:
                parts.append("".join(current))
        else:
            if not remove_empty or current:
                parts.append("".join(current))
            current = []
            if pos == last and not remove_empty:
                parts.append("")
    return parts


def ltrim(text: str, delimiters: str = " \t") -> str:
    """Strip leading characters found in *delimiters*."""
    return text.lstrip(delimiters)


def rtrim(text: str, delimiters: str = " \t") -> str:
    """Strip trailing characters found in *delimiters*."""
    return text.rstrip(delimiters)


def interpolate_ap(first: int, last: int, middle_terms: int) -> list[int]:
    """Return an arithmetic progression from *first* to *last*, truncated to ints.

    *middle_terms* values are placed between the two ends.
    """
    if middle_terms < 0:
        raise ValueError("middle_terms must not be negative")
    step = _f32(_f32(last - first) / _f32(middle_terms + 1))
    return [
        int(_f32(_f32(first) + _f32(_f32(i) * step)))
        for i in range(middle_terms + 2)
    ]


def amount_of_digits_int(value: int) -> int:
    """Count the decimal digits of a non-negative int; negative values give 0."""
    if value == 0:
        return 1
    if value < 0:
        return 0
    return len(str(value))


def is_equal_to_in_vector(value: int, places: list[int], limit: int) -> bool:
    """Tell whether *value* occurs among the first *limit* items of *places*."""
    return value in places[:max(limit, 0)]