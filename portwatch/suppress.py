"""Quiet-period suppression of repeated alerts per key."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class Suppressor:
    """Suppresses alerts for a key within *window* seconds of the last allowed one."""

    def __init__(
        self, window: float, clock: Callable[[], float] | None = None
    ) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self.window = window
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._last: dict[str, float] = {}

    def allow(self, key: str) -> bool:
        """Return True if *key* is outside its quiet period, recording now as baseline."""
        with self._lock:
            now = self._clock()
            last = self._last.get(key)
            if last is not None and now - last < self.window:
                return False
            self._last[key] = now
            return True

    def reset(self, key: str) -> None:
        """Clear the record for *key* so the next alert passes."""
        with self._lock:
            self._last.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._last)