"""Backslash-command autocomplete."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_letters

from pydantic import BaseModel, ConfigDict

from texassist.catalog.models import Category, SymbolEntry
from texassist.catalog.registry import SymbolCatalog
from texassist.catalog.symbols import DEFAULT_CATALOG

_LETTERS = frozenset(ascii_letters)


class Suggestion(BaseModel):
    """Read-only projection of a matching catalog entry."""

    model_config = ConfigDict(frozen=True)

    text: str
    description: str
    category: Category
    group: str | None = None

    @classmethod
    def from_entry(cls, entry: SymbolEntry) -> "Suggestion":
        return cls(
            text=entry.text,
            description=entry.description,
            category=entry.category,
            group=entry.group,
        )


@dataclass(frozen=True)
class CompletionResult:
    """Candidate, its span in the text, and the ranked suggestions."""

    candidate: str | None
    replace_range: tuple[int, int] | None
    suggestions: list[Suggestion] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return bool(self.suggestions)


def match_candidate(text_before_cursor: str) -> str | None:
    """Return the trailing ``\\letters`` run touching the end of the text."""

    idx = len(text_before_cursor)
    while idx > 0 and text_before_cursor[idx - 1] in _LETTERS:
        idx -= 1
    if idx > 0 and text_before_cursor[idx - 1] == "\\":
        return text_before_cursor[idx - 1 :]
    return None


def candidate_range(text: str, cursor: int) -> tuple[int, int] | None:
    """Return the ``(start, end)`` span of the candidate ending at ``cursor``."""

    assert 0 <= cursor <= len(text), f"cursor {cursor} outside text"
    candidate = match_candidate(text[:cursor])
    if candidate is None:
        return None
    return cursor - len(candidate), cursor


def suggestions_for(
    candidate: str | None,
    catalog: SymbolCatalog = DEFAULT_CATALOG,
    limit: int | None = None,
) -> list[Suggestion]:
    """Return catalog entries starting with ``candidate`` in declaration order."""

    if not candidate:
        return []
    matches = catalog.search_prefix(candidate)
    if limit is not None:
        matches = matches[:limit]
    return [Suggestion.from_entry(entry) for entry in matches]


class AutocompleteMatcher:
    """Catalog-bound matcher used by the editor session."""

    def __init__(self, catalog: SymbolCatalog = DEFAULT_CATALOG, limit: int | None = None) -> None:
        self.catalog = catalog
        self.limit = limit

    def match_candidate(self, text_before_cursor: str) -> str | None:
        return match_candidate(text_before_cursor)

    def suggestions_for(self, candidate: str | None) -> list[Suggestion]:
        return suggestions_for(candidate, self.catalog, self.limit)

    def complete(self, text: str, cursor: int) -> CompletionResult:
        """Extract the candidate before ``cursor`` and rank matches."""

        span = candidate_range(text, cursor)
        if span is None:
            return CompletionResult(candidate=None, replace_range=None)
        candidate = text[span[0] : span[1]]
        return CompletionResult(
            candidate=candidate,
            replace_range=span,
            suggestions=self.suggestions_for(candidate),
        )
