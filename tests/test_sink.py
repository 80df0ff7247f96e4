import io
import logging

import pytest

from portwatch.sink import Multi, SendError, Sink


class StubSender:
    def __init__(self, error=None):
        self.error = error
        self.received = []

    def notify(self, alert):
        self.received.append(alert)
        if self.error is not None:
            raise self.error


ALERT = {"target": "web", "severity": "warning", "status": "down"}


@pytest.fixture
def log_buffer():
    buffer = io.StringIO()
    logger = logging.getLogger(f"portwatch-test-sink-{id(buffer)}")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    yield logger, buffer
    logger.removeHandler(handler)


def test_new_rejects_empty_senders():
    with pytest.raises(ValueError):
        Sink({})


def test_dispatch_all_succeed():
    a, b = StubSender(), StubSender()
    errors = Sink({"a": a, "b": b}).dispatch(ALERT)
    assert errors == []
    assert a.received == [ALERT]
    assert b.received == [ALERT]


def test_dispatch_partial_failure():
    errors = Sink({"ok": StubSender(), "bad": StubSender(RuntimeError("boom"))}).dispatch(
        ALERT
    )
    assert len(errors) == 1
    assert errors[0].name == "bad"
    assert str(errors[0].error) == "boom"


def test_dispatch_all_fail():
    errors = Sink(
        {"x": StubSender(RuntimeError("x-err")), "y": StubSender(RuntimeError("y-err"))}
    ).dispatch(ALERT)
    assert len(errors) == 2
    assert sorted(error.name for error in errors) == ["x", "y"]


def test_send_error_string():
    error = SendError("webhook", RuntimeError("timeout"))
    assert str(error) == 'sink "webhook": timeout'


def test_multi_rejects_missing_sink(log_buffer):
    logger, _ = log_buffer
    with pytest.raises(ValueError):
        Multi(None, logger)


def test_multi_rejects_missing_logger():
    with pytest.raises(ValueError):
        Multi(Sink({"a": StubSender()}), None)


def test_multi_send_logs_errors(log_buffer):
    logger, buffer = log_buffer
    sender = StubSender(ConnectionError("net down"))
    sink = Sink({"failing": sender})
    result = Multi(sink, logger).send(ALERT)
    assert result is None
    assert sender.received == [ALERT]
    logged = buffer.getvalue()
    assert len(logged.splitlines()) == 1
    assert "failing" in logged
    assert "net down" in logged
    assert "[sink] dispatch error" in logged


def test_multi_send_silent_on_success(log_buffer):
    logger, buffer = log_buffer
    sender = StubSender()
    Multi(Sink({"ok": sender}), logger).send(ALERT)
    assert buffer.getvalue() == ""
    assert sender.received == [ALERT]