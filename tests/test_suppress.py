import pytest

from portwatch.suppress import Suppressor


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.mark.parametrize("window", [0, -1.0])
def test_rejects_non_positive_window(window):
    with pytest.raises(ValueError):
        Suppressor(window)


def test_first_call_always_true():
    assert Suppressor(60.0).allow("svc-a") is True


def test_suppressed_within_window():
    suppressor = Suppressor(60.0)
    suppressor.allow("svc-a")
    assert suppressor.allow("svc-a") is False


def test_passes_after_reset():
    suppressor = Suppressor(60.0)
    suppressor.allow("svc-a")
    suppressor.reset("svc-a")
    assert suppressor.allow("svc-a") is True


def test_passes_after_window_elapses():
    clock = FakeClock()
    suppressor = Suppressor(60.0, clock=clock)
    assert suppressor.allow("svc-a") is True
    clock.advance(59.0)
    assert suppressor.allow("svc-a") is False
    clock.advance(1.0)
    assert suppressor.allow("svc-a") is True


def test_independent_keys():
    suppressor = Suppressor(60.0)
    suppressor.allow("svc-a")
    assert suppressor.allow("svc-b") is True


def test_reset_clears_record():
    suppressor = Suppressor(60.0)
    suppressor.allow("svc-a")
    suppressor.reset("svc-a")
    assert suppressor.allow("svc-a") is True


def test_len_tracks_keys():
    suppressor = Suppressor(60.0)
    assert len(suppressor) == 0
    suppressor.allow("svc-a")
    suppressor.allow("svc-b")
    assert len(suppressor) == 2
    suppressor.reset("svc-a")
    assert len(suppressor) == 1