"""Append-only JSONL trace logger and a fail-safe sink wrapper."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol


class TraceSink(Protocol):
    """Anything that accepts trace events."""

    def append(self, event: dict) -> None:
        raise NotImplementedError


class TraceLogger:
    """Append-only JSONL logger for editor session events."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def __enter__(self) -> "TraceLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(self, event: dict) -> None:
        """Append one compact JSON event line."""

        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
        self._fh.write(line + "\n")

    def flush(self) -> None:
        self._fh.flush()

    def close(self) -> None:
        self._fh.close()


class SafeTraceSink:
    """Best-effort sink that never raises into the editing flow."""

    def __init__(self, sink: TraceSink | None) -> None:
        self._sink = sink
        self._enabled = sink is not None

    @property
    def enabled(self) -> bool:
        return self._enabled

    def append(self, event: dict) -> None:
        if not self._enabled or self._sink is None:
            return
        try:
            self._sink.append(event)
        except Exception as exc:
            self._enabled = False
            print(f"WARNING: session trace logging disabled: {exc}")

    def flush(self) -> None:
        if not self._enabled or self._sink is None:
            return
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except Exception as exc:
            self._enabled = False
            print(f"WARNING: session trace flush failed: {exc}")
