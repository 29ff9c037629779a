"""Inline math-mode detection by delimiter parity."""

from __future__ import annotations


def is_inside_math_mode(text_before_offset: str, delimiter: str = "$") -> bool:
    """Return True when an odd number of delimiters precede the offset.

    ``$$``, escaped ``\\$`` and ``\\(...\\)`` get no special treatment; every
    ``$`` toggles the state.
    """

    return text_before_offset.count(delimiter) % 2 == 1


def math_mode_at(text: str, offset: int, delimiter: str = "$") -> bool:
    """Return whether ``offset`` in ``text`` sits inside inline math."""

    assert 0 <= offset <= len(text), f"offset {offset} outside text"
    return is_inside_math_mode(text[:offset], delimiter)
