from __future__ import annotations

import json
from pathlib import Path

from texassist.trace import SafeTraceSink, TraceLogger, new_event


def test_new_event_fields() -> None:
    event = new_event("suggestions_opened", "3 suggestions", session="abc", data={"count": 3})

    assert len(event["event_id"]) == 32
    assert event["ts"].endswith("Z")
    assert event["session"] == "abc"
    assert event["kind"] == "suggestions_opened"
    assert event["data"] == {"count": 3}


def test_trace_logger_appends_jsonl(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "trace.jsonl"

    with TraceLogger(str(path)) as logger:
        logger.append(new_event("a", "first"))
        logger.append(new_event("b", "second ∑"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["kind"] for line in lines] == ["a", "b"]
    assert "∑" in lines[1]


def test_safe_sink_without_target_is_disabled() -> None:
    sink = SafeTraceSink(None)

    sink.append(new_event("a", "ignored"))
    sink.flush()

    assert sink.enabled is False
