from __future__ import annotations

import pytest

from texassist.core.offsets import index_to_utf16, utf16_length, utf16_to_index


def test_ascii_offsets_are_identical() -> None:
    text = r"$\frac{}{}$"
    assert utf16_length(text) == len(text)
    for idx in range(len(text) + 1):
        assert utf16_to_index(text, idx) == idx
        assert index_to_utf16(text, idx) == idx


def test_astral_characters_take_two_units() -> None:
    text = "a\U0001F600b"

    assert utf16_length(text) == 4
    assert utf16_to_index(text, 3) == 2
    assert index_to_utf16(text, 2) == 3
    assert index_to_utf16(text, 3) == 4


def test_offset_inside_surrogate_pair_snaps_forward() -> None:
    assert utf16_to_index("a\U0001F600b", 2) == 2


def test_out_of_range_offset_is_rejected() -> None:
    with pytest.raises(AssertionError):
        utf16_to_index("abc", 4)
