from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from texassist.catalog import (
    CatalogError,
    Category,
    SymbolCatalog,
    SymbolEntry,
    catalog_for_settings,
    dump_catalog,
    load_catalog,
)
from texassist.catalog.symbols import DEFAULT_CATALOG
from texassist.core.settings import EditorSettings


def test_dump_then_load_preserves_order(tmp_path: Path) -> None:
    catalog = SymbolCatalog(
        [
            SymbolEntry(text=r"\zeta", description="zeta", group="greek"),
            SymbolEntry(text=r"\choice", description="choice", category=Category.QUESTION),
        ]
    )
    path = tmp_path / "catalog.json"

    dump_catalog(catalog, path)
    loaded = load_catalog(path)

    assert [entry.text for entry in loaded] == [r"\zeta", r"\choice"]
    assert loaded.find(r"\choice").category is Category.QUESTION


def test_load_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"text": r"\alpha"}), encoding="utf-8")

    with pytest.raises(CatalogError) as exc_info:
        load_catalog(path)

    assert exc_info.value.path == str(path)


def test_load_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_validates_entries(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"text": "", "description": "empty"}]), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_catalog(path)


def test_catalog_for_settings(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"text": r"\foo", "description": "foo"}]), encoding="utf-8")

    assert catalog_for_settings(EditorSettings()) is DEFAULT_CATALOG
    custom = catalog_for_settings(EditorSettings(catalog_path=str(path)))
    assert [entry.text for entry in custom] == [r"\foo"]
