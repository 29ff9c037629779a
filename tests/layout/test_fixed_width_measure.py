from __future__ import annotations

import pytest
from pydantic import ValidationError

from texassist.layout import FixedWidthMeasure, TextStyle

_STYLE = TextStyle(font_size_px=10, line_height_px=20, container_width_px=60)


@pytest.mark.parametrize(
    ("text", "rows"),
    [
        ("", 1),
        ("a" * 10, 1),
        ("a" * 11, 2),
        ("a" * 25, 3),
        ("hello world", 2),
        ("hello worl", 1),
        ("a" * 10 + "   ", 1),
        ("ab\ncd", 2),
        ("ab\n\ncd", 3),
    ],
)
def test_row_count(text: str, rows: int) -> None:
    assert FixedWidthMeasure()(text, _STYLE).height_px == pytest.approx(rows * 20)


def test_width_is_capped_at_row_width() -> None:
    measure = FixedWidthMeasure()

    assert measure("abc", _STYLE).width_px == pytest.approx(18)
    assert measure("a" * 25, _STYLE).width_px == pytest.approx(60)


def test_letter_spacing_reduces_columns() -> None:
    style = TextStyle(font_size_px=10, line_height_px=20, container_width_px=60, letter_spacing_px=4)

    assert FixedWidthMeasure().columns(style) == 6


def test_style_rejects_padding_wider_than_container() -> None:
    with pytest.raises(ValidationError):
        TextStyle(container_width_px=20, padding_left_px=10, padding_right_px=10)
