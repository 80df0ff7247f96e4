import threading
import time

import pytest

from portwatch.watchdog import Watchdog


def test_new_rejects_zero_timeout():
    with pytest.raises(ValueError):
        Watchdog(0, lambda d: None)


def test_new_rejects_missing_handler():
    with pytest.raises(TypeError):
        Watchdog(1.0, None)


def _run_for(watchdog, seconds):
    stop = threading.Event()
    thread = threading.Thread(target=watchdog.run, args=(stop,), daemon=True)
    thread.start()
    time.sleep(seconds)
    stop.set()
    thread.join(1.0)
    return thread


def test_fires_when_stalled():
    stalls = []
    watchdog = Watchdog(0.05, stalls.append)
    thread = _run_for(watchdog, 0.2)
    assert not thread.is_alive()
    assert len(stalls) > 0
    assert all(stalled > 0.05 for stalled in stalls)


def test_silent_when_pinged():
    stalls = []
    watchdog = Watchdog(0.08, stalls.append)
    stop = threading.Event()
    thread = threading.Thread(target=watchdog.run, args=(stop,), daemon=True)
    thread.start()
    deadline = time.monotonic() + 0.2
    while time.monotonic() < deadline:
        watchdog.ping()
        time.sleep(0.02)
    stop.set()
    thread.join(1.0)
    assert stalls == []


def test_stops_on_cancel():
    stalls = []
    watchdog = Watchdog(0.05, stalls.append)
    stop = threading.Event()
    done = threading.Event()
    results = []

    def runner():
        results.append(watchdog.run(stop))
        done.set()

    thread = threading.Thread(target=runner, daemon=True)
    thread.start()
    stop.set()
    assert done.wait(0.5) is True
    thread.join(0.5)
    assert not thread.is_alive()
    assert results == [None]
    assert stalls == []