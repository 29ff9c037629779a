"""CLI computing the visual caret position and popup anchor."""

from __future__ import annotations

import argparse
import json

from texassist.cli.complete import add_text_arguments, resolve_offset, resolve_text
from texassist.core.settings import load_settings
from texassist.layout.measure import FixedWidthMeasure
from texassist.layout.style import TextStyle
from texassist.layout.visual import anchor_popup, map_offset_to_visual_position


def main(argv: list[str] | None = None) -> int:
    """Run the position CLI with the fixed-width measurement oracle."""

    parser = argparse.ArgumentParser(
        description="Map a caret offset to a wrapped visual position (monospace estimate)."
    )
    add_text_arguments(parser)
    parser.add_argument("--offset", type=int, help="Caret offset (default: end of text).")
    parser.add_argument("--width", type=float, default=600.0, help="Container width in px.")
    parser.add_argument("--font-size", type=float, default=14.0, help="Font size in px.")
    parser.add_argument("--line-height", type=float, default=22.4, help="Line height in px.")
    parser.add_argument("--padding", type=float, default=0.0, help="Uniform container padding in px.")
    parser.add_argument("--origin-x", type=float, default=0.0)
    parser.add_argument("--origin-y", type=float, default=0.0)
    parser.add_argument("--scroll-left", type=float, default=0.0)
    parser.add_argument("--scroll-top", type=float, default=0.0)
    args = parser.parse_args(argv)

    try:
        text = resolve_text(args)
        offset = resolve_offset(text, args.offset)
        settings = load_settings(args.settings)
        style = TextStyle(
            font_size_px=args.font_size,
            line_height_px=args.line_height,
            container_width_px=args.width,
            padding_top_px=args.padding,
            padding_left_px=args.padding,
            padding_right_px=args.padding,
        )
        measure = FixedWidthMeasure(char_width_ratio=settings.char_width_ratio)
        position = map_offset_to_visual_position(
            text,
            offset,
            measure,
            style,
            char_width_ratio=settings.char_width_ratio,
        )
        anchor = anchor_popup(
            position,
            style,
            origin_x=args.origin_x,
            origin_y=args.origin_y,
            scroll_left=args.scroll_left,
            scroll_top=args.scroll_top,
            gap_px=settings.popup_gap_px,
        )
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    payload = {"position": position.model_dump(), "anchor": anchor.model_dump()}
    print(json.dumps(payload))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
