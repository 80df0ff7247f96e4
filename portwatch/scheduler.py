"""Interval scheduler that drives periodic port checks.

The check function is called once immediately, then once per interval,
until the stop event is set. Setting the event makes ``run`` return after
any call in flight completes.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

CheckFunc = Callable[[threading.Event], None]


class Scheduler:
    """Calls a check function at a fixed interval in seconds."""

    def __init__(self, interval: float, fn: CheckFunc) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        if fn is None or not callable(fn):
            raise TypeError("fn must be callable")
        self._interval = interval
        self._fn = fn

    @property
    def interval(self) -> float:
        """The configured tick interval in seconds."""
        return self._interval

    def run(self, stop: threading.Event) -> None:
        """Call the function now and on every tick until *stop* is set."""
        self._fn(stop)
        next_tick = time.monotonic() + self._interval
        while not stop.wait(max(0.0, next_tick - time.monotonic())):
            self._fn(stop)
            next_tick += self._interval
            now = time.monotonic()
            if next_tick <= now:
                # Ticks missed during a slow call are dropped, not replayed.
                next_tick = now + self._interval