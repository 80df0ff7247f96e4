"""Per-key limit on the number of events allowed within a time window."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class Throttle:
    """Allows at most *limit* events per key within any *window* seconds."""

    def __init__(
        self, limit: int, window: float, clock: Callable[[], float] | None = None
    ) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        if window <= 0:
            raise ValueError("window must be positive")
        self.limit = limit
        self.window = window
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._buckets: dict[str, list[float]] = {}

    def allow(self, key: str) -> bool:
        """Return True and record the event if *key* is under its limit."""
        with self._lock:
            now = self._clock()
            cutoff = now - self.window
            valid = [ts for ts in self._buckets.get(key, ()) if ts > cutoff]
            if len(valid) >= self.limit:
                self._buckets[key] = valid
                return False
            valid.append(now)
            self._buckets[key] = valid
            return True

    def reset(self, key: str) -> None:
        """Forget all recorded events for *key*."""
        with self._lock:
            self._buckets.pop(key, None)