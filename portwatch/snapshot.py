"""Point-in-time views of monitored target statuses.

A SnapshotStore accumulates the latest status per target; ``capture``
returns an immutable Snapshot, which a SnapshotWriter renders as a text
table sorted by target name.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TextIO

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


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
class TargetRecord:
    """The last known status of a single target."""

    target: str
    host: str = ""
    port: int = 0
    up: bool = False
    since: datetime = _ZERO_TIME
    checks: int = 0


@dataclass(frozen=True)
class Snapshot:
    """An immutable copy of all target statuses at *captured_at*."""

    captured_at: datetime
    statuses: tuple[TargetRecord, ...] = field(default_factory=tuple)


class SnapshotStore:
    """Thread-safe store of the latest status per target key."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._entries: dict[str, TargetRecord] = {}

    def record(self, key: str, status: TargetRecord) -> None:
        """Store *status* as the latest for *key*."""
        with self._lock:
            self._entries[key] = status

    def capture(self) -> Snapshot:
        """Return a Snapshot of all current statuses."""
        with self._lock:
            statuses = tuple(self._entries.values())
        return Snapshot(captured_at=self._clock(), statuses=statuses)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class SnapshotWriter:
    """Renders snapshots as a human-readable text table."""

    def __init__(self, out: TextIO, title: str = "") -> None:
        if out is None:
            raise ValueError("writer must not be None")
        self._out = out
        self.title = title or "Port Status Snapshot"

    def write(self, snap: Snapshot) -> None:
        """Write *snap* with rows sorted by target name."""
        rows = sorted(snap.statuses, key=lambda status: status.target)
        lines = [f"=== {self.title} ({_rfc3339(snap.captured_at)}) ===\n"]
        if not rows:
            lines.append("  (no targets)\n")
        else:
            lines.append(f"  {'TARGET':<24} {'STATUS':<6} SINCE\n")
            lines.append("  " + "-" * 52 + "\n")
            for status in rows:
                label = "UP" if status.up else "DOWN"
                lines.append(
                    f"  {status.target:<24} {label:<6} {_rfc3339(status.since)}\n"
                )
        self._out.write("".join(lines))