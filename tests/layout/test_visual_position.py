from __future__ import annotations

import pytest

from texassist.layout import (
    FixedWidthMeasure,
    TextMeasurement,
    TextStyle,
    VisualPosition,
    anchor_popup,
    map_offset_to_visual_position,
)

# 10px font * 0.6 => 6px glyphs, 60px content => 10 columns per row.
_STYLE = TextStyle(font_size_px=10, line_height_px=20, container_width_px=60)
_MEASURE = FixedWidthMeasure()


def _map(text: str, offset: int, style: TextStyle = _STYLE) -> VisualPosition:
    return map_offset_to_visual_position(text, offset, _MEASURE, style)


def test_empty_text_maps_to_origin() -> None:
    position = _map("", 0)

    assert position.line_index == 0
    assert position.column_index == 0
    assert position.column_offset_px == 0
    assert position.line_top_px == 0


def test_short_text_stays_on_first_line() -> None:
    text = r"x = \alpha"
    for offset in range(len(text) + 1):
        assert _map(text, offset).line_index == 0


def test_single_row_oracle_never_reports_wrapping() -> None:
    def one_row(text: str, style: TextStyle) -> TextMeasurement:
        return TextMeasurement(width_px=len(text) * 6.0, height_px=style.line_height_px)

    text = "a" * 200
    for offset in (0, 1, 50, 200):
        position = map_offset_to_visual_position(text, offset, one_row, _STYLE)
        assert position.line_index == 0
        assert position.column_index == offset


def test_column_uses_average_glyph_width() -> None:
    position = _map("hello", 5)

    assert position.column_index == 5
    assert position.column_offset_px == pytest.approx(30.0)


def test_logical_lines_advance_rows() -> None:
    position = _map("hello\nworld", 8)

    assert position.line_index == 1
    assert position.column_index == 2
    assert position.line_top_px == pytest.approx(20.0)


def test_soft_wrap_inside_current_line() -> None:
    position = _map("a" * 15, 15)

    assert position.line_index == 1
    assert position.column_index == 5


def test_wrapped_previous_line_counts_all_rows() -> None:
    position = _map("a" * 15 + "\nb", 17)

    assert position.line_index == 2
    assert position.column_index == 1


def test_empty_logical_lines_still_take_a_row() -> None:
    position = _map("\n\nx", 3)

    assert position.line_index == 2
    assert position.column_index == 1


def test_word_wrap_moves_caret_to_next_row() -> None:
    assert _map("hello world", 10).line_index == 0
    assert _map("hello world", 11).line_index == 1


def test_padding_offsets_the_position() -> None:
    style = TextStyle(
        font_size_px=10,
        line_height_px=20,
        container_width_px=76,
        padding_top_px=4,
        padding_left_px=8,
        padding_right_px=8,
    )

    position = _map("ab\ncd", 4, style)

    assert position.line_index == 1
    assert position.column_offset_px == pytest.approx(8 + 6)
    assert position.line_top_px == pytest.approx(4 + 20)


def test_char_width_ratio_override() -> None:
    position = map_offset_to_visual_position("abc", 3, _MEASURE, _STYLE, char_width_ratio=0.5)

    assert position.column_offset_px == pytest.approx(15.0)


def test_measure_errors_propagate() -> None:
    def broken(text: str, style: TextStyle) -> TextMeasurement:
        raise RuntimeError("layout engine unavailable")

    with pytest.raises(RuntimeError):
        map_offset_to_visual_position("abc", 2, broken, _STYLE)


def test_offset_outside_text_is_rejected() -> None:
    with pytest.raises(AssertionError):
        _map("abc", 4)


def test_anchor_sits_below_caret_line() -> None:
    position = VisualPosition(line_index=1, column_index=2, column_offset_px=12, line_top_px=20)

    anchor = anchor_popup(
        position,
        _STYLE,
        origin_x=100,
        origin_y=50,
        scroll_left=2,
        scroll_top=10,
        gap_px=5,
    )

    assert anchor.x == pytest.approx(110)
    assert anchor.y == pytest.approx(85)
