"""Last known reachability of monitored targets, for detecting transitions."""

from __future__ import annotations

import threading
from enum import Enum


class Status(Enum):
    """Whether a port is reachable."""

    UNKNOWN = 0
    UP = 1
    DOWN = 2

    def __str__(self) -> str:
        return self.name.lower()


class StateStore:
    """Thread-safe map from target key to its last recorded status."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Status] = {}

    def get(self, key: str) -> Status:
        """Return the last status for *key*, or ``Status.UNKNOWN`` if never set."""
        with self._lock:
            return self._entries.get(key, Status.UNKNOWN)

    def set(self, key: str, status: Status) -> bool:
        """Record *status* for *key*; return True if it differs from the previous value."""
        with self._lock:
            previous = self._entries.get(key, Status.UNKNOWN)
            self._entries[key] = status
            return previous != status

    def snapshot(self) -> dict[str, Status]:
        """Return a copy of all stored entries."""
        with self._lock:
            return dict(self._entries)