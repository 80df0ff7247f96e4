"""Counting semaphore that caps concurrent work.

Useful when fanning probe work out across many targets, to cap the
number of simultaneous outbound dials:

    gate = Turnstile(10)
    with gate:
        ...
"""

from __future__ import annotations

import threading


class Turnstile:
    """Lets at most *capacity* threads pass at once."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._free = capacity
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        """The total number of slots."""
        return self._capacity

    @property
    def available(self) -> int:
        """The number of slots currently free."""
        with self._cond:
            return self._free

    def acquire(self, timeout: float | None = None) -> None:
        """Take a slot, waiting up to *timeout* seconds; raise TimeoutError if none frees."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._free > 0, timeout):
                raise TimeoutError("no turnstile slot became available")
            self._free -= 1

    def release(self) -> None:
        """Return a slot taken by ``acquire``."""
        with self._cond:
            if self._free >= self._capacity:
                raise RuntimeError("release without a matching acquire")
            self._free += 1
            self._cond.notify()

    def __enter__(self) -> Turnstile:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()