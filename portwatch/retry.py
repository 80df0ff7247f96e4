"""Retry policy with exponential back-off.

The pause between attempt i and attempt i+1 is the base delay multiplied
by ``multiplier`` i times, capped at ``max_delay`` from the second pause on.
Defaults: base_delay=0.2 s, max_delay=30 s, multiplier=2.0.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


class ExhaustedError(Exception):
    """Every attempt failed."""


class CancelledError(Exception):
    """The retry loop was cancelled before it could succeed."""


@dataclass
class Policy:
    """How many times to try and how long to wait between tries (seconds)."""

    attempts: int
    base_delay: float = 0.2
    max_delay: float = 30.0
    multiplier: float = 2.0

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")

    def run(
        self, fn: Callable[[], T], cancel: threading.Event | None = None
    ) -> T:
        """Call *fn* until it returns without raising, and return its result.

        Raises ExhaustedError, chained to the last failure, when every attempt
        fails, and CancelledError as soon as *cancel* is seen set.
        """
        delay = self.base_delay
        last_error: Exception | None = None
        for attempt in range(1, self.attempts + 1):
            if cancel is not None and cancel.is_set():
                raise CancelledError("retry cancelled")
            try:
                return fn()
            except Exception as exc:
                last_error = exc
            if attempt == self.attempts:
                break
            if cancel is None:
                time.sleep(delay)
            elif cancel.wait(delay):
                raise CancelledError("retry cancelled") from last_error
            delay = min(delay * self.multiplier, self.max_delay)
        raise ExhaustedError("all attempts exhausted") from last_error