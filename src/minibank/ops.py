"""Operational utilities for minibank."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict


class StructuredLogger:
    """Record bank events as dictionaries and optionally as JSON lines on disk."""

    def __init__(self, *, path: Path | None = None) -> None:
        self.path = path
        self._entries: list[Dict[str, Any]] = []

    def log(self, event_type: str, **fields: Any) -> Dict[str, Any]:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": event_type,
            **fields,
        }
        self._entries.append(entry)
        if self.path:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(entry, default=str) + "\n")
        return entry

    def tail(self, limit: int = 50) -> tuple[Dict[str, Any], ...]:
        if limit <= 0:
            return tuple()
        return tuple(self._entries[-limit:])

    def events(self, event_type: str) -> tuple[Dict[str, Any], ...]:
        return tuple(entry for entry in self._entries if entry["event"] == event_type)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["StructuredLogger"]
