"""Per-target cooldown that suppresses repeated alerts.

When a service flaps, the monitor may fire many alerts in quick succession.
A Limiter lets the first alert for a key through and suppresses the rest
until the cooldown has elapsed; ``reset`` clears the cooldown for a key.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class Limiter:
    """Tracks the last alert time per key and enforces a cooldown in seconds."""

    def __init__(
        self, cooldown: float, clock: Callable[[], float] | None = None
    ) -> None:
        if cooldown <= 0:
            raise ValueError("cooldown must be positive")
        self._cooldown = cooldown
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._last: dict[str, float] = {}

    @property
    def cooldown(self) -> float:
        """The configured cooldown in seconds."""
        return self._cooldown

    def allow(self, key: str) -> bool:
        """Return True if an alert for *key* may pass, recording the time if so."""
        with self._lock:
            now = self._clock()
            last = self._last.get(key)
            if last is not None and now - last < self._cooldown:
                return False
            self._last[key] = now
            return True

    def reset(self, key: str) -> None:
        """Clear the recorded time for *key*."""
        with self._lock:
            self._last.pop(key, None)

    def remaining(self, key: str) -> float:
        """Seconds left in the cooldown for *key*; zero if untracked or elapsed."""
        with self._lock:
            last = self._last.get(key)
            if last is None:
                return 0.0
            return max(0.0, self._cooldown - (self._clock() - last))