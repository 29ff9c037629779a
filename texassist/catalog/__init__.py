"""Symbol catalog used by autocomplete and the symbol palette."""

from texassist.catalog.models import Category, SymbolEntry
from texassist.catalog.registry import CatalogError, SymbolCatalog, dump_catalog, load_catalog
from texassist.catalog.symbols import BUILTIN_ENTRIES, DEFAULT_CATALOG, catalog_for_settings

__all__ = [
    "BUILTIN_ENTRIES",
    "DEFAULT_CATALOG",
    "CatalogError",
    "Category",
    "SymbolCatalog",
    "SymbolEntry",
    "catalog_for_settings",
    "dump_catalog",
    "load_catalog",
]
