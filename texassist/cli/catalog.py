"""CLI listing catalog entries."""

from __future__ import annotations

import argparse
import json

from texassist.catalog.models import Category
from texassist.catalog.symbols import catalog_for_settings
from texassist.core.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    """Print catalog entries as a JSON list."""

    parser = argparse.ArgumentParser(description="List symbol catalog entries.")
    parser.add_argument("--settings", help="Path to a JSON settings file.")
    parser.add_argument("--group", help="Only entries of this palette group.")
    parser.add_argument(
        "--category",
        choices=[item.value for item in Category],
        help="Only entries of this category.",
    )
    parser.add_argument("--groups", action="store_true", help="Print group names only.")
    args = parser.parse_args(argv)

    try:
        catalog = catalog_for_settings(load_settings(args.settings))
        if args.groups:
            payload: list = catalog.groups()
        else:
            entries = list(catalog)
            if args.group:
                entries = [entry for entry in entries if entry.group == args.group]
            if args.category:
                entries = [entry for entry in entries if entry.category.value == args.category]
            payload = [entry.model_dump(mode="json", exclude_none=True) for entry in entries]
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
