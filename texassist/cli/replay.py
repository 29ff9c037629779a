"""Replay a scripted sequence of editor events through a session.

Script format (JSON object)::

    {
      "initial_text": "",
      "style": {"container_width_px": 300},   # optional, enables anchors
      "events": [
        {"type": "text", "text": "\\\\fr", "cursor": 3},
        {"type": "key", "key": "Enter"}
      ]
    }

Event types: ``text``, ``cursor``, ``key``, ``accept``, ``insert``,
``click_outside``, ``viewport``.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from texassist.catalog.symbols import catalog_for_settings
from texassist.core.settings import load_settings
from texassist.layout.measure import FixedWidthMeasure
from texassist.layout.style import TextStyle
from texassist.session.controller import EditorSessionController
from texassist.trace import TraceLogger


def _apply_event(session: EditorSessionController, event: dict) -> dict | None:
    kind = event.get("type")
    if kind == "text":
        session.on_text_change(event["text"], event["cursor"])
    elif kind == "cursor":
        session.on_cursor_move(event["cursor"])
    elif kind == "key":
        session.on_key(event["key"])
    elif kind == "accept":
        update = session.accept(event.get("index"))
        return update.model_dump() if update is not None else None
    elif kind == "insert":
        return session.insert_symbol(event["symbol"], event.get("category")).model_dump()
    elif kind == "click_outside":
        session.on_click_outside()
    elif kind == "viewport":
        session.set_viewport(
            origin_x=event.get("origin_x", 0.0),
            origin_y=event.get("origin_y", 0.0),
            scroll_left=event.get("scroll_left", 0.0),
            scroll_top=event.get("scroll_top", 0.0),
        )
    else:
        raise ValueError(f"Unsupported event type: {kind!r}")
    return None


def replay_script(script: dict, *, settings=None, trace=None) -> dict:
    """Run every event of ``script`` and return the final session snapshot."""

    settings = settings or load_settings()
    style_payload = script.get("style")
    style = TextStyle.model_validate(style_payload) if style_payload is not None else None
    session = EditorSessionController(
        script.get("initial_text", ""),
        cursor=script.get("cursor"),
        catalog=catalog_for_settings(settings),
        settings=settings,
        measure=FixedWidthMeasure(settings.char_width_ratio) if style is not None else None,
        style=style,
        trace=trace,
        offset_units=script.get("offset_units", "utf16"),
    )

    events = script.get("events", [])
    if not isinstance(events, list):
        raise ValueError("script.events must be a list")

    updates = []
    for event in events:
        if not isinstance(event, dict):
            raise ValueError(f"event must be an object: {event!r}")
        update = _apply_event(session, event)
        if update is not None:
            updates.append(update)

    popup = session.popup
    snapshot = {
        "text": session.text,
        "cursor": session.cursor,
        "state": session.state.value,
        "popup": popup.model_dump(mode="json") if popup is not None else None,
        "updates": updates,
    }
    session.unmount()
    return snapshot


def main(argv: list[str] | None = None) -> int:
    """Run the replay CLI."""

    parser = argparse.ArgumentParser(description="Replay editor events through a session.")
    parser.add_argument("path", help="Path to a JSON event script.")
    parser.add_argument("--settings", help="Path to a JSON settings file.")
    parser.add_argument("--trace", help="Append session trace events to this JSONL file.")
    args = parser.parse_args(argv)

    trace_logger: TraceLogger | None = None
    try:
        script = json.loads(Path(args.path).read_text(encoding="utf-8"))
        if not isinstance(script, dict):
            raise ValueError("script must be a JSON object")
        settings = load_settings(args.settings)
        if args.trace:
            try:
                trace_logger = TraceLogger(args.trace)
            except Exception as exc:
                print(f"WARNING: session trace logging disabled: {exc}")
        payload = replay_script(script, settings=settings, trace=trace_logger)
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1
    finally:
        if trace_logger is not None:
            trace_logger.close()

    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
