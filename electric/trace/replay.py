"""Replay trace events for testing and debugging."""

from pathlib import Path
from typing import List, Optional

from electric.trace.schema import Event, EventType
from electric.trace.store_jsonl import JsonlTraceStore


def load_events(path: Path, event_type: Optional[EventType] = None) -> List[Event]:
    """Load events from a trace file.

    Args:
        path: Path to JSONL trace file.
        event_type: Only return events of this type.

    Returns:
        List of events, oldest first.
    """
    events = JsonlTraceStore(path).iter_events()
    if event_type is None:
        return list(events)
    wanted = EventType(event_type).value
    return [event for event in events if event.type == wanted]
