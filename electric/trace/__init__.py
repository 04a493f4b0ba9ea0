"""Trace journal for pipeline events."""

from electric.trace.schema import Event, EventType, new_event, now_iso
from electric.trace.store_jsonl import JsonlTraceStore
from electric.trace.replay import load_events

__all__ = ["Event", "EventType", "new_event", "now_iso", "JsonlTraceStore", "load_events"]
