"""Pydantic models for catalog records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Insertion policy of a catalog entry."""

    LATEX = "latex"
    MARKDOWN = "markdown"
    QUESTION = "question"


class SymbolEntry(BaseModel):
    """Read-only catalog record.

    ``text`` is the literal template inserted into the editor. It may hold
    placeholder groups such as ``{a}`` or bracket pairs such as
    ``\\left(\\right)``. ``group`` names the palette section the entry is
    listed under.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    description: str = ""
    category: Category = Category.LATEX
    group: str | None = None
