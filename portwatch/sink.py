"""Fan-out of alerts to several named senders.

A Sink hands each alert to every sender concurrently and returns a
SendError for each one that failed. A Multi wraps a Sink for best-effort
use: it logs failures and never raises them.

A sender is any object with a ``notify(alert)`` method that raises on
failure.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol


class _Sender(Protocol):
    def notify(self, alert: Any) -> None: ...


class SendError(Exception):
    """The failure of one named sender."""

    def __init__(self, name: str, error: BaseException) -> None:
        super().__init__(name, error)
        self.name = name
        self.error = error

    def __str__(self) -> str:
        return f'sink "{self.name}": {self.error}'


class Sink:
    """Dispatches an alert to a set of named senders concurrently."""

    def __init__(self, senders: Mapping[str, _Sender]) -> None:
        if not senders:
            raise ValueError("senders must not be empty")
        self._senders = dict(senders)

    def dispatch(self, alert: Any) -> list[SendError]:
        """Send *alert* to every sender; return one SendError per failure."""
        with ThreadPoolExecutor(max_workers=len(self._senders)) as pool:
            futures = {
                name: pool.submit(sender.notify, alert)
                for name, sender in self._senders.items()
            }
        errors = []
        for name, future in futures.items():
            error = future.exception()
            if error is not None:
                errors.append(SendError(name, error))
        return errors


class Multi:
    """Best-effort wrapper around a Sink that logs failures instead of raising."""

    def __init__(self, sink: Sink, logger: logging.Logger) -> None:
        if sink is None:
            raise ValueError("Multi requires a sink")
        if logger is None:
            raise ValueError("Multi requires a logger")
        self._sink = sink
        self._logger = logger

    def send(self, alert: Any) -> None:
        """Dispatch *alert* and log each failure."""
        for error in self._sink.dispatch(alert):
            self._logger.error("[sink] dispatch error: %s", error)