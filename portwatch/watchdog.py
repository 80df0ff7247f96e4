"""Detection of a stalled check loop.

The loop calls ``ping`` on each pass; if no ping arrives within the
timeout, the watchdog calls its handler with how long the loop has been
silent.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

Handler = Callable[[float], None]


class Watchdog:
    """Calls *handler* when no ping has been seen for *timeout* seconds."""

    def __init__(
        self,
        timeout: float,
        handler: Handler,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        if handler is None or not callable(handler):
            raise TypeError("handler must be callable")
        self._timeout = timeout
        self._handler = handler
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._last_ping = self._clock()

    @property
    def timeout(self) -> float:
        """The stall threshold in seconds."""
        return self._timeout

    def ping(self) -> None:
        """Record a heartbeat now."""
        with self._lock:
            self._last_ping = self._clock()

    def run(self, stop: threading.Event) -> None:
        """Check for stalls every half timeout until *stop* is set."""
        while not stop.wait(self._timeout / 2):
            with self._lock:
                since = self._clock() - self._last_ping
            if since > self._timeout:
                self._handler(since)