"""CLI printing autocomplete suggestions for a caret position."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from texassist.catalog.symbols import catalog_for_settings
from texassist.complete.matcher import AutocompleteMatcher
from texassist.core.settings import load_settings


def add_text_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the shared text input options."""

    parser.add_argument("path", nargs="?", help="Path to a UTF-8 text file.")
    parser.add_argument("--text", help="Literal editor text (instead of a file).")
    parser.add_argument("--settings", help="Path to a JSON settings file.")


def resolve_text(args: argparse.Namespace) -> str:
    """Return editor text from --text or the positional file path."""

    if args.text is not None and args.path:
        raise ValueError("path and --text are mutually exclusive")
    if args.text is not None:
        return args.text
    if not args.path:
        raise ValueError("either a path or --text is required")
    return Path(args.path).read_text(encoding="utf-8")


def resolve_offset(text: str, offset: int | None) -> int:
    if offset is None:
        return len(text)
    if not 0 <= offset <= len(text):
        raise ValueError(f"offset {offset} outside text of length {len(text)}")
    return offset


def main(argv: list[str] | None = None) -> int:
    """Run the completion CLI."""

    parser = argparse.ArgumentParser(description="List LaTeX command completions at a caret.")
    add_text_arguments(parser)
    parser.add_argument("--cursor", type=int, help="Caret offset (default: end of text).")
    args = parser.parse_args(argv)

    try:
        text = resolve_text(args)
        cursor = resolve_offset(text, args.cursor)
        settings = load_settings(args.settings)
        matcher = AutocompleteMatcher(catalog_for_settings(settings), settings.max_suggestions)
        result = matcher.complete(text, cursor)
        payload = {
            "candidate": result.candidate,
            "replace_range": list(result.replace_range) if result.replace_range else None,
            "suggestions": [item.model_dump(mode="json") for item in result.suggestions],
        }
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
