"""Deterministic measurement oracle for monospace text.

Stands in for the host layout engine in the CLI and in tests. It follows
pre-wrap semantics: whitespace is preserved and never starts a new row on
its own, words move to the next row when they do not fit, and words longer
than a row break anywhere.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from texassist.layout.style import TextMeasurement, TextStyle

_TOKEN_RE = re.compile(r"\s+|\S+")


def _count_rows(line: str, columns: int) -> int:
    rows = 1
    col = 0
    for token in _TOKEN_RE.findall(line):
        if token[0].isspace():
            col += len(token)
            continue
        if col > 0 and col + len(token) > columns:
            rows += 1
            col = 0
        remaining = len(token)
        while col + remaining > columns:
            remaining -= columns - col
            rows += 1
            col = 0
        col += remaining
    return rows


@dataclass(frozen=True)
class FixedWidthMeasure:
    """Measure text as if every glyph had the same advance."""

    char_width_ratio: float = 0.6

    def char_width_px(self, style: TextStyle) -> float:
        return style.average_char_width_px(self.char_width_ratio) + style.letter_spacing_px

    def columns(self, style: TextStyle) -> int:
        return max(int(style.content_width_px // self.char_width_px(style)), 1)

    def __call__(self, text: str, style: TextStyle) -> TextMeasurement:
        columns = self.columns(style)
        rows = 0
        widest = 0
        for line in text.split("\n"):
            rows += _count_rows(line, columns)
            widest = max(widest, min(len(line), columns))
        return TextMeasurement(
            width_px=widest * self.char_width_px(style),
            height_px=rows * style.line_height_px,
        )
