"""Editor session controller.

Owns one editor's buffer and the ``idle`` / ``suggestions_open`` popup
state. Every event recomputes derived state synchronously from the
current buffer; matching, insertion and layout stay pure functions.
Offsets exchanged with the host are UTF-16 code units unless the session
is created with ``offset_units="codepoint"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from texassist.catalog.models import Category
from texassist.catalog.registry import SymbolCatalog
from texassist.catalog.symbols import catalog_for_settings
from texassist.complete.matcher import AutocompleteMatcher, Suggestion
from texassist.core.buffer import EditBuffer
from texassist.core.offsets import index_to_utf16, utf16_to_index
from texassist.core.settings import DEFAULT_SETTINGS, EditorSettings
from texassist.latex.insertion import InsertionResult, insert_symbol
from texassist.layout.style import MeasureFn, TextStyle
from texassist.layout.visual import (
    PopupAnchor,
    VisualPosition,
    anchor_popup,
    map_offset_to_visual_position,
)
from texassist.trace import SafeTraceSink, TraceSink, new_event


class SessionState(str, Enum):
    """Popup state of an editor session."""

    IDLE = "idle"
    SUGGESTIONS_OPEN = "suggestions_open"


class Key(str, Enum):
    """Keys the session reacts to while suggestions are open."""

    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ENTER = "Enter"
    ESCAPE = "Escape"


class OffsetUnits(str, Enum):
    UTF16 = "utf16"
    CODEPOINT = "codepoint"


@dataclass(frozen=True)
class Viewport:
    """Screen origin and scroll offsets of the text container."""

    origin_x: float = 0.0
    origin_y: float = 0.0
    scroll_left: float = 0.0
    scroll_top: float = 0.0


class EditorUpdate(BaseModel):
    """Text and caret the host should apply to its input control."""

    model_config = ConfigDict(frozen=True)

    text: str
    cursor: int


class PopupView(BaseModel):
    """Everything the host needs to render the suggestion popup."""

    model_config = ConfigDict(frozen=True)

    suggestions: list[Suggestion]
    selected_index: int
    position: VisualPosition | None = None
    anchor: PopupAnchor | None = None


class EditorSessionController:
    """Drive autocomplete and symbol insertion for a single editor."""

    def __init__(
        self,
        initial_text: str = "",
        *,
        cursor: int | None = None,
        catalog: SymbolCatalog | None = None,
        settings: EditorSettings | None = None,
        measure: MeasureFn | None = None,
        style: TextStyle | None = None,
        trace: TraceSink | None = None,
        offset_units: OffsetUnits | str = OffsetUnits.UTF16,
        session_id: str | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.catalog = catalog if catalog is not None else catalog_for_settings(self.settings)
        self.matcher = AutocompleteMatcher(self.catalog, self.settings.max_suggestions)
        self.measure = measure
        self.style = style
        self.offset_units = OffsetUnits(offset_units)
        self.session_id = session_id or uuid4().hex
        self._trace = SafeTraceSink(trace)
        self._viewport = Viewport()
        self._mounted = True

        index = len(initial_text) if cursor is None else self._to_index(initial_text, cursor)
        self._buffer = EditBuffer(text=initial_text, cursor=index)
        self._state = SessionState.IDLE
        self._suggestions: list[Suggestion] = []
        self._selected = 0
        self._replace_range: tuple[int, int] | None = None
        self._position: VisualPosition | None = None
        self._anchor: PopupAnchor | None = None

    # -- host-facing state -------------------------------------------------

    @property
    def buffer(self) -> EditBuffer:
        return self._buffer

    @property
    def text(self) -> str:
        return self._buffer.text

    @property
    def cursor(self) -> int:
        return self._to_host(self._buffer.text, self._buffer.cursor)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.SUGGESTIONS_OPEN

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        return tuple(self._suggestions)

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected_suggestion(self) -> Suggestion | None:
        if not self.is_open:
            return None
        return self._suggestions[self._selected]

    @property
    def popup(self) -> PopupView | None:
        if not self.is_open:
            return None
        return PopupView(
            suggestions=list(self._suggestions),
            selected_index=self._selected,
            position=self._position,
            anchor=self._anchor,
        )

    # -- events --------------------------------------------------------------

    def on_text_change(self, text: str, cursor: int) -> None:
        """Handle a full-text change reported by the host."""

        self._ensure_mounted()
        self._buffer = EditBuffer(text=text, cursor=self._to_index(text, cursor))
        self._refresh()

    def on_cursor_move(self, cursor: int) -> None:
        """Handle a caret move without a text change."""

        self._ensure_mounted()
        text = self._buffer.text
        self._buffer = EditBuffer(text=text, cursor=self._to_index(text, cursor))
        self._refresh()

    def on_key(self, key: Key | str) -> bool:
        """Handle a navigation key; return True when the key was consumed."""

        self._ensure_mounted()
        if not self.is_open:
            return False
        try:
            key = Key(key)
        except ValueError:
            return False

        count = len(self._suggestions)
        if key is Key.ARROW_DOWN:
            self._selected = (self._selected + 1) % count
        elif key is Key.ARROW_UP:
            self._selected = (self._selected - 1) % count
        elif key is Key.ENTER:
            self.accept()
        elif key is Key.ESCAPE:
            self._close("escape")
        return True

    def on_click_outside(self) -> None:
        self._ensure_mounted()
        self._close("click_outside")

    def set_viewport(
        self,
        *,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        scroll_left: float = 0.0,
        scroll_top: float = 0.0,
    ) -> None:
        """Record the container's screen origin and scroll offsets."""

        self._viewport = Viewport(
            origin_x=origin_x,
            origin_y=origin_y,
            scroll_left=scroll_left,
            scroll_top=scroll_top,
        )
        if self.is_open:
            self._position, self._anchor = self._locate()

    def accept(self, index: int | None = None) -> EditorUpdate | None:
        """Insert the selected (or given) suggestion over the typed candidate."""

        self._ensure_mounted()
        if not self.is_open:
            return None
        if index is not None:
            assert 0 <= index < len(self._suggestions), f"suggestion index {index} out of range"
            self._selected = index
        suggestion = self._suggestions[self._selected]
        result = insert_symbol(
            suggestion.text,
            suggestion.category,
            self._buffer,
            self._replace_range,
            settings=self.settings,
        )
        update = self._apply(result)
        self._emit(
            "suggestion_accepted",
            f"Accepted {suggestion.text}",
            {"text": suggestion.text, "wrapped": result.wrapped, "cursor": update.cursor},
        )
        self._close("accepted")
        return update

    def insert_symbol(self, symbol: str, category: Category | str | None = None) -> EditorUpdate:
        """Insert a palette symbol at the caret, bypassing autocomplete."""

        self._ensure_mounted()
        resolved = Category(category) if category is not None else self.catalog.category_for(symbol)
        result = insert_symbol(symbol, resolved, self._buffer, settings=self.settings)
        update = self._apply(result)
        self._emit(
            "symbol_inserted",
            f"Inserted {symbol}",
            {"text": symbol, "category": resolved.value, "wrapped": result.wrapped},
        )
        self._close("symbol_inserted")
        return update

    def close(self) -> None:
        self._close("closed")

    def unmount(self) -> None:
        """Return to idle and stop accepting events."""

        self._close("unmount")
        self._trace.flush()
        self._mounted = False

    # -- internals -----------------------------------------------------------

    def _ensure_mounted(self) -> None:
        if not self._mounted:
            raise RuntimeError(f"editor session {self.session_id} is unmounted")

    def _to_index(self, text: str, offset: int) -> int:
        if self.offset_units is OffsetUnits.UTF16:
            return utf16_to_index(text, offset)
        assert 0 <= offset <= len(text), f"offset {offset} outside text"
        return offset

    def _to_host(self, text: str, index: int) -> int:
        if self.offset_units is OffsetUnits.UTF16:
            return index_to_utf16(text, index)
        return index

    def _apply(self, result: InsertionResult) -> EditorUpdate:
        self._buffer = result.buffer
        return EditorUpdate(text=self.text, cursor=self.cursor)

    def _refresh(self) -> None:
        completion = self.matcher.complete(self._buffer.text, self._buffer.cursor)
        if not completion.is_open:
            self._close("no_match")
            return

        was_open = self.is_open
        self._suggestions = completion.suggestions
        self._selected = 0
        self._replace_range = completion.replace_range
        self._state = SessionState.SUGGESTIONS_OPEN
        self._position, self._anchor = self._locate()
        if not was_open:
            self._emit(
                "suggestions_opened",
                f"{len(self._suggestions)} suggestions for {completion.candidate}",
                {"candidate": completion.candidate, "count": len(self._suggestions)},
            )

    def _close(self, reason: str) -> None:
        if not self.is_open:
            return
        self._state = SessionState.IDLE
        self._suggestions = []
        self._selected = 0
        self._replace_range = None
        self._position = None
        self._anchor = None
        self._emit("suggestions_closed", f"Suggestions closed ({reason})", {"reason": reason})

    def _locate(self) -> tuple[VisualPosition | None, PopupAnchor | None]:
        if self.measure is None or self.style is None:
            return None, None
        position = map_offset_to_visual_position(
            self._buffer.text,
            self._buffer.cursor,
            self.measure,
            self.style,
            char_width_ratio=self.settings.char_width_ratio,
        )
        anchor = anchor_popup(
            position,
            self.style,
            origin_x=self._viewport.origin_x,
            origin_y=self._viewport.origin_y,
            scroll_left=self._viewport.scroll_left,
            scroll_top=self._viewport.scroll_top,
            gap_px=self.settings.popup_gap_px,
        )
        return position, anchor

    def _emit(self, kind: str, message: str, data: dict) -> None:
        self._trace.append(new_event(kind, message, session=self.session_id, data=data))
