"""Core value types shared by the input-assistance modules."""

from texassist.core.buffer import EditBuffer
from texassist.core.offsets import index_to_utf16, utf16_length, utf16_to_index
from texassist.core.settings import (
    DEFAULT_SETTINGS,
    FONT_COMMANDS,
    QUESTION_COMMANDS,
    EditorSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "FONT_COMMANDS",
    "QUESTION_COMMANDS",
    "EditBuffer",
    "EditorSettings",
    "index_to_utf16",
    "load_settings",
    "utf16_length",
    "utf16_to_index",
]
