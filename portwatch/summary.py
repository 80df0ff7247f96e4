"""Periodic status summaries of all monitored targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TextIO


def _rfc3339_utc(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _format_duration(delta: timedelta) -> str:
    micros = delta // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    seconds = abs(micros) // 1_000_000
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    if secs:
        return f"{sign}{secs}s"
    return "0s"


@dataclass(frozen=True)
class TargetStatus:
    """Name, address and current state of a target, and since when."""

    name: str
    addr: str
    up: bool
    since: datetime


@dataclass(frozen=True)
class SummarySnapshot:
    """Statuses of all targets at the moment *at*."""

    at: datetime
    targets: tuple[TargetStatus, ...] = field(default_factory=tuple)


class SummaryWriter:
    """Formats summary snapshots and writes them to a text stream."""

    def __init__(self, out: TextIO, title: str = "") -> None:
        if out is None:
            raise ValueError("writer must not be None")
        self._out = out
        self.title = title or "Port Status Summary"

    def write(self, snap: SummarySnapshot) -> None:
        """Write the formatted summary of *snap*."""
        lines = [f"=== {self.title} — {_rfc3339_utc(snap.at)} ===\n"]
        if not snap.targets:
            lines.append("  (no targets)\n")
        for target in snap.targets:
            status = "UP  " if target.up else "DOWN"
            duration = _format_duration(snap.at - target.since)
            lines.append(
                f"  [{status}] {target.name:<20} {target.addr}  (for {duration})\n"
            )
        lines.append("-" * 60 + "\n")
        self._out.write("".join(lines))