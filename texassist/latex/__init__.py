"""Math-mode tracking and symbol insertion for LaTeX input."""

from texassist.latex.insertion import InsertionResult, insert_symbol
from texassist.latex.math_mode import is_inside_math_mode, math_mode_at
from texassist.latex.placeholders import clean_placeholders, smart_cursor_offset

__all__ = [
    "InsertionResult",
    "clean_placeholders",
    "insert_symbol",
    "is_inside_math_mode",
    "math_mode_at",
    "smart_cursor_offset",
]
