"""Trace logging helpers for editor sessions."""

from texassist.trace.event import new_event
from texassist.trace.logger import SafeTraceSink, TraceLogger, TraceSink

__all__ = ["SafeTraceSink", "TraceLogger", "TraceSink", "new_event"]
