"""Probabilistic sampling of alert events.

A Sampler lets through roughly *rate* of the events it sees, where rate
lies in [0.0, 1.0]: 1.0 passes everything and 0.0 nothing. A KeyedSampler
keeps an independent Sampler per key, such as per target name.
"""

from __future__ import annotations

import random
import threading
from collections.abc import Callable


class Sampler:
    """Decides at random whether an event passes, at a fixed rate."""

    def __init__(self, rate: float, source: Callable[[], float] | None = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"rate must be in [0.0, 1.0], got {rate}")
        if source is None:
            source = random.random
        elif not callable(source):
            raise TypeError("source must be a callable returning a float")
        self._rate = rate
        self._source = source
        self._lock = threading.Lock()

    @property
    def rate(self) -> float:
        """The configured sample rate."""
        return self._rate

    def allow(self) -> bool:
        """Return True if the event should pass."""
        if self._rate == 1.0:
            return True
        if self._rate == 0.0:
            return False
        with self._lock:
            return self._source() < self._rate


class KeyedSampler:
    """Keeps an independent Sampler per key, all at the same rate."""

    def __init__(self, rate: float, source: Callable[[], float] | None = None) -> None:
        Sampler(rate, source)
        self.rate = rate
        self._source = source
        self._lock = threading.Lock()
        self._samplers: dict[str, Sampler] = {}

    def allow(self, key: str) -> bool:
        """Return True if the event for *key* should pass."""
        with self._lock:
            sampler = self._samplers.get(key)
            if sampler is None:
                sampler = Sampler(self.rate, self._source)
                self._samplers[key] = sampler
        return sampler.allow()

    def keys(self) -> list[str]:
        """Return every key seen so far."""
        with self._lock:
            return list(self._samplers)