import pytest

from portwatch.window import Counter


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.mark.parametrize("duration", [0, -1.0])
def test_rejects_non_positive_window(duration):
    with pytest.raises(ValueError):
        Counter(duration)


def test_count_empty_on_start():
    assert Counter(1.0).count() == 0


def test_add_increments_count():
    counter = Counter(1.0)
    counter.add()
    counter.add()
    counter.add()
    assert counter.count() == 3


def test_count_evicts_old_events():
    clock = FakeClock()
    counter = Counter(0.05, clock=clock)
    counter.add()
    counter.add()
    clock.advance(0.08)
    counter.add()
    assert counter.count() == 1


def test_event_exactly_at_cutoff_is_kept():
    clock = FakeClock()
    counter = Counter(10.0, clock=clock)
    counter.add()
    clock.advance(10.0)
    assert counter.count() == 1
    clock.advance(0.5)
    assert counter.count() == 0


def test_reset_clears_all():
    counter = Counter(1.0)
    counter.add()
    counter.add()
    counter.reset()
    assert counter.count() == 0


def test_count_all_evicted_returns_zero():
    clock = FakeClock()
    counter = Counter(0.03, clock=clock)
    counter.add()
    clock.advance(0.06)
    assert counter.count() == 0