"""Insert catalog templates into an edit buffer."""

from __future__ import annotations

from dataclasses import dataclass

from texassist.catalog.models import Category
from texassist.core.buffer import EditBuffer
from texassist.core.settings import DEFAULT_SETTINGS, EditorSettings
from texassist.latex.math_mode import is_inside_math_mode
from texassist.latex.placeholders import clean_placeholders, smart_cursor_offset


@dataclass(frozen=True)
class InsertionResult:
    """Outcome of a template insertion."""

    new_text: str
    cursor_offset: int
    inserted_text: str
    wrapped: bool

    @property
    def buffer(self) -> EditBuffer:
        return EditBuffer(text=self.new_text, cursor=self.cursor_offset)


def insert_symbol(
    template: str,
    category: Category | str,
    buffer: EditBuffer,
    replace_range: tuple[int, int] | None = None,
    *,
    settings: EditorSettings | None = None,
) -> InsertionResult:
    """Splice a cleaned template into ``buffer`` and place the caret.

    ``replace_range`` covers the typed candidate on autocomplete acceptance;
    without it the template is inserted at the caret. LaTeX and Markdown
    templates are wrapped in math delimiters when the insertion point lies
    outside math mode. Question templates are never wrapped.
    """

    settings = settings or DEFAULT_SETTINGS
    category = Category(category)
    start, end = replace_range if replace_range is not None else (buffer.cursor, buffer.cursor)
    assert 0 <= start <= end <= len(buffer.text), f"bad replace range ({start}, {end})"

    cleaned = clean_placeholders(template, settings.font_commands)
    before = buffer.text[:start]
    delimiter = settings.math_delimiter
    wrapped = category is not Category.QUESTION and not is_inside_math_mode(before, delimiter)
    inserted = f"{delimiter}{cleaned}{delimiter}" if wrapped else cleaned

    relative = smart_cursor_offset(cleaned)
    if relative is None:
        cursor = start + len(inserted)
    else:
        cursor = start + relative + (len(delimiter) if wrapped else 0)

    return InsertionResult(
        new_text=before + inserted + buffer.text[end:],
        cursor_offset=cursor,
        inserted_text=inserted,
        wrapped=wrapped,
    )
