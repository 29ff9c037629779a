"""CLI package for texassist tools."""

__all__ = [
    "catalog",
    "complete",
    "insert",
    "position",
    "replay",
]
