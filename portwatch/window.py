"""Sliding-window event counter."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable


class Counter:
    """Counts events that occurred within a rolling window of *window* seconds."""

    def __init__(
        self, window: float, clock: Callable[[], float] | None = None
    ) -> None:
        if window <= 0:
            raise ValueError("window duration must be positive")
        self.window = window
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._timestamps: deque[float] = deque()

    def add(self) -> None:
        """Record an event at the current time."""
        with self._lock:
            now = self._clock()
            self._timestamps.append(now)
            self._evict(now)

    def count(self) -> int:
        """Return the number of events inside the current window."""
        with self._lock:
            self._evict(self._clock())
            return len(self._timestamps)

    def reset(self) -> None:
        """Forget all recorded events."""
        with self._lock:
            self._timestamps.clear()

    def _evict(self, now: float) -> None:
        cutoff = now - self.window
        while self._timestamps and self._timestamps[0] < cutoff:
            self._timestamps.popleft()