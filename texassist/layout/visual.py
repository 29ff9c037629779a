"""Map a logical caret offset to a visual (line, column) position.

Soft wrapping is detected through the injected measurement oracle: a
logical line spans as many rows as its wrapped height holds line heights,
and within the caret's own line each growth of the prefix height marks a
new visual row. The horizontal offset is an estimate built from the
average glyph width, not from glyph-exact measurement.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from texassist.layout.style import MeasureFn, TextStyle


class VisualPosition(BaseModel):
    """Caret location inside the text container, before scrolling."""

    model_config = ConfigDict(frozen=True)

    line_index: int = Field(ge=0)
    column_index: int = Field(ge=0)
    column_offset_px: float
    line_top_px: float


class PopupAnchor(BaseModel):
    """Viewport coordinates for the suggestion popup's top-left corner."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


def _visual_rows(height_px: float, line_height_px: float) -> int:
    # An empty logical line still occupies one row.
    rows = math.ceil(round(height_px / line_height_px, 6))
    return max(rows, 1)


def _locate_in_line(line: str, measure: MeasureFn, style: TextStyle) -> tuple[int, int]:
    rows = 0
    column = 0
    previous: float | None = None
    for end in range(1, len(line) + 1):
        height = measure(line[:end], style).height_px
        if previous is not None and height > previous:
            rows += 1
            column = 0
        column += 1
        previous = height
    return rows, column


def map_offset_to_visual_position(
    text: str,
    offset: int,
    measure: MeasureFn,
    style: TextStyle,
    *,
    char_width_ratio: float = 0.6,
) -> VisualPosition:
    """Return the visual line and column of ``offset`` in wrapped ``text``.

    Errors raised by ``measure`` propagate to the caller.
    """

    assert 0 <= offset <= len(text), f"offset {offset} outside text"

    logical_lines = text[:offset].split("\n")
    current_line = logical_lines[-1]

    visual_line_count = 0
    for line in logical_lines[:-1]:
        visual_line_count += _visual_rows(measure(line, style).height_px, style.line_height_px)

    row_offset, column = _locate_in_line(current_line, measure, style)
    line_index = visual_line_count + row_offset

    return VisualPosition(
        line_index=line_index,
        column_index=column,
        column_offset_px=style.padding_left_px
        + column * style.average_char_width_px(char_width_ratio),
        line_top_px=style.padding_top_px + line_index * style.line_height_px,
    )


def anchor_popup(
    position: VisualPosition,
    style: TextStyle,
    *,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
    scroll_left: float = 0.0,
    scroll_top: float = 0.0,
    gap_px: float = 5.0,
) -> PopupAnchor:
    """Place the popup ``gap_px`` below the caret's visual line."""

    return PopupAnchor(
        x=origin_x + position.column_offset_px - scroll_left,
        y=origin_y + position.line_top_px + style.line_height_px - scroll_top + gap_px,
    )
