"""Concurrent TCP probing with latency measurement.

A Prober dials a ``host:port`` address and records whether the connection
succeeded, how long the attempt took and when it started. ``batch`` probes
many targets at once and returns results in the order given.
"""

from __future__ import annotations

import socket
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe attempt; *latency* is in seconds."""

    target: str
    addr: str
    up: bool
    latency: float
    at: datetime


@dataclass(frozen=True)
class ProbeTarget:
    """A logical name paired with a TCP address."""

    name: str
    addr: str


def _split_addr(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port:
        raise ValueError(f"address {addr!r} has no port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


class Prober:
    """Performs TCP probes with a fixed dial timeout in seconds."""

    def __init__(self, timeout: float) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.timeout = timeout

    def probe(self, target: str, addr: str) -> ProbeResult:
        """Dial *addr*; a successful connection means the target is up."""
        at = datetime.now(timezone.utc)
        start = time.perf_counter()
        try:
            host, port = _split_addr(addr)
            with socket.create_connection((host, port), timeout=self.timeout):
                pass
        except (OSError, ValueError):
            up = False
        else:
            up = True
        latency = time.perf_counter() - start
        return ProbeResult(target=target, addr=addr, up=up, latency=latency, at=at)

    def batch(self, targets: Sequence[ProbeTarget]) -> list[ProbeResult]:
        """Probe every target concurrently; results follow the input order."""
        targets = list(targets)
        if not targets:
            return []
        with ThreadPoolExecutor(max_workers=len(targets)) as pool:
            return list(pool.map(lambda t: self.probe(t.name, t.addr), targets))