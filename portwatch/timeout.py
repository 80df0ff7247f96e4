"""TCP checks bounded by a per-check deadline."""

from __future__ import annotations

import socket
import threading
from collections.abc import Callable

Dialer = Callable[[str, int, float], None]


class CheckError(Exception):
    """A check could not reach its target."""


class CheckTimeoutError(CheckError):
    """A check ran past its deadline or was cancelled."""


def _tcp_dial(host: str, port: int, timeout: float) -> None:
    with socket.create_connection((host, port), timeout=timeout):
        pass


class TimeoutChecker:
    """Opens a TCP connection to a target within a fixed timeout in seconds."""

    def __init__(self, timeout: float, dial: Dialer | None = None) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = timeout
        self._dial = dial or _tcp_dial

    @property
    def timeout(self) -> float:
        """The configured deadline in seconds."""
        return self._timeout

    def check(
        self, host: str, port: int, cancel: threading.Event | None = None
    ) -> str:
        """Connect to *host*:*port* and return the address reached.

        Raises CheckTimeoutError when the deadline passes or *cancel* is set,
        and CheckError for any other failure.
        """
        addr = f"{host}:{port}"
        timed_out = CheckTimeoutError(
            f"check timed out after {self._timeout}s for {addr}"
        )
        if cancel is not None and cancel.is_set():
            raise timed_out
        try:
            self._dial(host, port, self._timeout)
        except (socket.timeout, TimeoutError) as exc:
            raise timed_out from exc
        except OSError as exc:
            if cancel is not None and cancel.is_set():
                raise timed_out from exc
            raise CheckError(f"dial {addr}: {exc}") from exc
        return addr