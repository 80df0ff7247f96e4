# portwatch

Small, thread-safe building blocks for watching TCP ports and deciding when an
alert should go out. The package has no third-party dependencies.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## What is inside

| Module | Purpose |
| --- | --- |
| `portwatch.probe` | `Prober(timeout)` dials a `host:port` address with `probe(target, addr)` and returns a `ProbeResult` with `up`, `latency` (seconds) and `at` (start time). `batch(targets)` probes a sequence of `ProbeTarget(name, addr)` concurrently and returns results in input order. |
| `portwatch.timeout` | `TimeoutChecker(timeout)` connects to `host`:`port` with `check(host, port, cancel=None)` and returns the address it reached. It raises `CheckTimeoutError` when the deadline passes or the `cancel` event is set, and `CheckError` for any other failure. |
| `portwatch.state` | `StateStore` remembers the last `Status` (`UNKNOWN`, `UP`, `DOWN`) per key. `set` returns `True` when the value changed. `snapshot` returns a copy. |
| `portwatch.notifier` | `Notifier(out=None)` writes one line per state-change `Event`, to standard output by default. |
| `portwatch.ratelimit` | `Limiter(cooldown)` lets the first alert per key through and suppresses the rest until the cooldown has passed. It also has `reset`, `remaining` and a `cooldown` property. |
| `portwatch.suppress` | `Suppressor(window)` enforces a quiet window per key. `len()` gives the number of keys it tracks. |
| `portwatch.throttle` | `Throttle(limit, window)` allows at most `limit` events per key within any `window` seconds. |
| `portwatch.window` | `Counter(window)` counts events inside a sliding time window (`add`, `count`, `reset`). |
| `portwatch.mute` | `MuteStore` holds `datetime`-bounded mute windows per target (`mute`, `unmute`, `is_muted`). `active()` returns the still-open windows as `MuteWindow` values. |
| `portwatch.sampler` | `Sampler(rate, source=None)` lets roughly `rate` (0.0–1.0) of events through. `KeyedSampler` keeps one such sampler per key. |
| `portwatch.turnstile` | `Turnstile(capacity)` is a counting semaphore. `acquire(timeout)` raises `TimeoutError` when no slot frees in time. The object also works as a context manager and has `capacity` and `available` properties. |
| `portwatch.retry` | `Policy(attempts, base_delay=0.2, max_delay=30.0, multiplier=2.0)` calls a function with `run(fn, cancel=None)` until it succeeds, backing off exponentially between tries. It raises `ExhaustedError` (chained to the last failure) or `CancelledError`. |
| `portwatch.scheduler` | `Scheduler(interval, fn)` calls `fn(stop)` at once and then on every interval until the `stop` event passed to `run` is set. |
| `portwatch.watchdog` | `Watchdog(timeout, handler)` calls `handler(seconds_silent)` when `ping` has not been called within the timeout while `run(stop)` is active. |
| `portwatch.sink` | `Sink(senders)` passes an alert to every named sender's `notify` method concurrently. `dispatch` returns a `SendError` for each sender that raised. `Multi(sink, logger)` logs those errors instead of returning them. |
| `portwatch.snapshot` | `SnapshotStore` keeps the latest `TargetRecord` per key. `capture()` returns an immutable `Snapshot`. `SnapshotWriter` renders a snapshot as a table sorted by target. |
| `portwatch.summary` | `SummaryWriter` renders a `SummarySnapshot` of `TargetStatus` entries, showing how long each target has been up or down (for example `1m30s`). |
| `portwatch.tagger` | `normalise`, `dedupe`, `validate` and `prepare` clean up target tags. Tags that are not lowercase alphanumeric words joined by hyphens raise `InvalidTagError`. |

Durations such as timeouts, cooldowns and windows are given in seconds as
floats. Mute windows and summary and snapshot times are `datetime` values.
`Counter`, `Throttle`, `Suppressor`, `Limiter`, `Watchdog` and `SnapshotStore`
accept an optional `clock` callable, and `MuteStore` accepts an optional `now`
callable, so tests can control time. `TimeoutChecker` accepts a `dial`
callable for the same purpose.

## Example

```python
import sys
from datetime import datetime, timezone

from portwatch.notifier import Event, Notifier
from portwatch.probe import Prober, ProbeTarget
from portwatch.ratelimit import Limiter
from portwatch.state import StateStore, Status

prober = Prober(timeout=2.0)
store = StateStore()
limiter = Limiter(cooldown=300.0)
notifier = Notifier(sys.stdout)

targets = [ProbeTarget("api", "127.0.0.1:8080"), ProbeTarget("db", "127.0.0.1:5432")]
for result in prober.batch(targets):
    status = Status.UP if result.up else Status.DOWN
    if store.set(result.target, status) and limiter.allow(result.target):
        host, _, port = result.addr.rpartition(":")
        notifier.notify(Event(
            target=result.target,
            host=host,
            port=int(port),
            up=result.up,
            timestamp=datetime.now(timezone.utc),
        ))
```

Each changed target produces one line like this:

    [2024-01-15T10:00:00Z] api (127.0.0.1:8080) is DOWN

## What it does not do

This is a library of parts, not a running monitor. It has no command-line
program. It does not read a configuration file, and no ready-made daemon loop
ties probing, state tracking and notification together: you compose those
yourself, as in the example above. Alerts go to a text stream or to sender
objects that you supply. There is no built-in webhook, e-mail or chat
delivery, and no state is stored on disk.