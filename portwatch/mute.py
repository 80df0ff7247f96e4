"""Time-bounded mute windows that silence alerts for a target."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MuteWindow:
    """A mute period for one target, active until *until*."""

    target: str
    until: datetime


class MuteStore:
    """Holds active mute windows keyed by target name."""

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        self._now = now or _utc_now
        self._lock = threading.Lock()
        self._windows: dict[str, datetime] = {}

    def mute(self, target: str, until: datetime) -> None:
        """Mute *target* until *until*, replacing any earlier window."""
        with self._lock:
            self._windows[target] = until

    def unmute(self, target: str) -> None:
        """Remove any mute window for *target*."""
        with self._lock:
            self._windows.pop(target, None)

    def is_muted(self, target: str) -> bool:
        """Return True if *target* has a window that has not yet passed."""
        with self._lock:
            until = self._windows.get(target)
            return until is not None and self._now() <= until

    def active(self) -> list[MuteWindow]:
        """Return every window that is still active."""
        with self._lock:
            now = self._now()
            return [
                MuteWindow(target, until)
                for target, until in self._windows.items()
                if now <= until
            ]