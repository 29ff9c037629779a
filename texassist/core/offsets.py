"""Conversions between host UTF-16 offsets and Python string indices.

Text inputs report caret positions in UTF-16 code units, while Python
indexes strings by code point. The two only differ for characters outside
the Basic Multilingual Plane (emoji, some CJK extensions), which occupy a
surrogate pair on the host side.
"""

from __future__ import annotations


def _units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Return the length of ``text`` in UTF-16 code units."""

    return sum(_units(ch) for ch in text)


def utf16_to_index(text: str, offset: int) -> int:
    """Map a UTF-16 offset to a str index.

    An offset that falls between the two halves of a surrogate pair snaps
    forward to the end of that character.
    """

    assert 0 <= offset <= utf16_length(text), f"offset {offset} outside text"
    units = 0
    for idx, ch in enumerate(text):
        if units >= offset:
            return idx
        units += _units(ch)
    return len(text)


def index_to_utf16(text: str, index: int) -> int:
    """Map a str index to a UTF-16 offset."""

    assert 0 <= index <= len(text), f"index {index} outside text"
    return utf16_length(text[:index])
