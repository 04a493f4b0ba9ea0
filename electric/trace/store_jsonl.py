"""JSONL trace store implementation."""

import json
from pathlib import Path
from typing import Iterator

from electric.trace.schema import Event


class JsonlTraceStore:
    """Store trace events in JSONL format."""

    def __init__(self, path: Path):
        """Initialize trace store.

        Args:
            path: Path to JSONL file. The file and its parent directories are
                created on the first append.
        """
        self.path = Path(path)
        self._file = None

    def append(self, event: Event):
        """Append an event to the trace store.

        Args:
            event: Event to append.
        """
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, "a", encoding="utf-8")
        line = json.dumps(event.model_dump(mode="json"), ensure_ascii=False)
        self._file.write(line + "\n")
        self._file.flush()

    def iter_events(self) -> Iterator[Event]:
        """Iterate over all events in the store.

        Yields:
            Event objects from the trace store.
        """
        if not self.path.exists():
            return

        with open(self.path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                    yield Event(**data)
                except (json.JSONDecodeError, ValueError):
                    # Truncated line from an interrupted run
                    continue

    def close(self):
        """Close the trace store file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
