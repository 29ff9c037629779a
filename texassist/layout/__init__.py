"""Caret-to-visual-position mapping for popup placement."""

from texassist.layout.measure import FixedWidthMeasure
from texassist.layout.style import MeasureFn, TextMeasurement, TextStyle
from texassist.layout.visual import (
    PopupAnchor,
    VisualPosition,
    anchor_popup,
    map_offset_to_visual_position,
)

__all__ = [
    "FixedWidthMeasure",
    "MeasureFn",
    "PopupAnchor",
    "TextMeasurement",
    "TextStyle",
    "VisualPosition",
    "anchor_popup",
    "map_offset_to_visual_position",
]
