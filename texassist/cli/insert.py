"""CLI applying a symbol insertion to editor text."""

from __future__ import annotations

import argparse
import json

from texassist.catalog.models import Category
from texassist.catalog.symbols import catalog_for_settings
from texassist.cli.complete import add_text_arguments, resolve_offset, resolve_text
from texassist.core.buffer import EditBuffer
from texassist.core.settings import load_settings
from texassist.latex.insertion import insert_symbol


def main(argv: list[str] | None = None) -> int:
    """Run the insertion CLI."""

    parser = argparse.ArgumentParser(description="Insert a LaTeX symbol template at a caret.")
    add_text_arguments(parser)
    parser.add_argument("--symbol", required=True, help="Template text to insert.")
    parser.add_argument("--cursor", type=int, help="Caret offset (default: end of text).")
    parser.add_argument(
        "--category",
        choices=[item.value for item in Category],
        help="Insertion category (default: inferred from the catalog).",
    )
    parser.add_argument(
        "--replace",
        nargs=2,
        type=int,
        metavar=("START", "END"),
        help="Replace text[START:END] instead of inserting at the caret.",
    )
    args = parser.parse_args(argv)

    try:
        text = resolve_text(args)
        cursor = resolve_offset(text, args.cursor)
        settings = load_settings(args.settings)
        category = args.category or catalog_for_settings(settings).category_for(args.symbol)
        replace_range = tuple(args.replace) if args.replace else None
        if replace_range is not None and not 0 <= replace_range[0] <= replace_range[1] <= len(text):
            raise ValueError(f"replace range {list(replace_range)} outside text")
        result = insert_symbol(
            args.symbol,
            category,
            EditBuffer(text=text, cursor=cursor),
            replace_range,
            settings=settings,
        )
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    payload = {
        "new_text": result.new_text,
        "cursor": result.cursor_offset,
        "wrapped": result.wrapped,
    }
    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
