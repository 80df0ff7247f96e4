"""Alert delivery for monitored targets that change state.

When a monitored port goes down or comes back up, a Notifier writes a
single human-readable line describing the event:

    [2024-01-15T10:00:00Z] api (10.0.0.1:443) is DOWN
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TextIO


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    offset = moment.utcoffset() or timedelta(0)
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if offset == timedelta(0):
        return base + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{base}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class Event:
    """A state change for a monitored target."""

    target: str
    host: str
    port: int
    up: bool
    timestamp: datetime


class Notifier:
    """Writes alert lines for state-change events; defaults to standard output."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def notify(self, event: Event) -> None:
        """Format *event* and write it as one line."""
        out = self._out if self._out is not None else sys.stdout
        status = "UP" if event.up else "DOWN"
        out.write(
            f"[{_rfc3339(event.timestamp)}] {event.target} "
            f"({event.host}:{event.port}) is {status}\n"
        )