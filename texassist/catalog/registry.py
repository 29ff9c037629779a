"""Ordered, read-only symbol catalog with prefix lookup."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path

from texassist.catalog.models import Category, SymbolEntry
from texassist.core.settings import QUESTION_COMMANDS


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or has the wrong shape."""

    def __init__(self, *, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return f"CatalogError(path={self.path!r}): {self.reason}"


class SymbolCatalog:
    """Catalog of symbol templates in declaration order.

    Entries sharing the same ``text`` keep the first declaration.
    """

    def __init__(self, entries: Iterable[SymbolEntry]) -> None:
        by_text: dict[str, SymbolEntry] = {}
        for entry in entries:
            if entry.text not in by_text:
                by_text[entry.text] = entry
        self._by_text = by_text
        self._entries: tuple[SymbolEntry, ...] = tuple(by_text.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[SymbolEntry, ...]:
        return self._entries

    def search_prefix(self, prefix: str) -> list[SymbolEntry]:
        """Return entries whose text starts with ``prefix`` (case-sensitive)."""

        if not prefix:
            return []
        return [entry for entry in self._entries if entry.text.startswith(prefix)]

    def find(self, text: str) -> SymbolEntry | None:
        return self._by_text.get(text)

    def groups(self) -> list[str]:
        """Return palette group names in declaration order."""

        seen: list[str] = []
        for entry in self._entries:
            if entry.group is not None and entry.group not in seen:
                seen.append(entry.group)
        return seen

    def by_group(self, group: str) -> list[SymbolEntry]:
        return [entry for entry in self._entries if entry.group == group]

    def by_category(self, category: Category | str) -> list[SymbolEntry]:
        wanted = Category(category)
        return [entry for entry in self._entries if entry.category == wanted]

    def category_for(self, symbol: str) -> Category:
        """Infer the insertion category of a freeform palette symbol."""

        entry = self.find(symbol)
        if entry is not None:
            return entry.category
        if any(symbol.startswith(command) for command in QUESTION_COMMANDS):
            return Category.QUESTION
        return Category.LATEX


def load_catalog(path: str | Path) -> SymbolCatalog:
    """Load a catalog from a JSON list of entry objects."""

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(path=str(path), reason=str(exc)) from exc
    if not isinstance(payload, list):
        raise CatalogError(path=str(path), reason="catalog must be a JSON list")
    return SymbolCatalog(SymbolEntry.model_validate(item) for item in payload)


def dump_catalog(catalog: SymbolCatalog, path: str | Path) -> None:
    """Write catalog entries to a JSON file."""

    payload = [entry.model_dump(mode="json", exclude_none=True) for entry in catalog]
    Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
