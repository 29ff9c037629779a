"""Editor session orchestration."""

from texassist.session.controller import (
    EditorSessionController,
    EditorUpdate,
    Key,
    OffsetUnits,
    PopupView,
    SessionState,
    Viewport,
)

__all__ = [
    "EditorSessionController",
    "EditorUpdate",
    "Key",
    "OffsetUnits",
    "PopupView",
    "SessionState",
    "Viewport",
]
