from datetime import timedelta

import pytest

from tweetkit.backoffs import (
    ExponentialBackOff,
    new_aggressive_exponential_backoff,
    new_exponential_backoff,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_new_exponential_backoff():
    b = new_exponential_backoff()
    assert b.initial_interval == timedelta(seconds=5)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(seconds=320)


def test_new_aggressive_exponential_backoff():
    b = new_aggressive_exponential_backoff()
    assert b.initial_interval == timedelta(minutes=1)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(minutes=16)


def _deterministic(backoff):
    clock = FakeClock()
    backoff.clock = clock
    backoff.randomization_factor = 0.0
    backoff.reset()
    return clock


def test_sequence_grows_and_caps():
    b = new_exponential_backoff()
    _deterministic(b)
    waits = [b.next_backoff() for _ in range(9)]
    assert waits[0] == b.initial_interval
    assert waits == sorted(waits)
    assert all(w <= b.max_interval for w in waits)
    assert waits[-1] == b.max_interval


def test_reset_restores_initial_interval():
    b = new_aggressive_exponential_backoff()
    _deterministic(b)
    for _ in range(4):
        b.next_backoff()
    b.reset()
    assert b.next_backoff() == b.initial_interval


def test_stops_after_max_elapsed_time():
    b = new_exponential_backoff()
    clock = _deterministic(b)
    b.max_elapsed_time = timedelta(seconds=10)
    clock.now = 11.0
    assert b.next_backoff() is None


def test_zero_max_elapsed_time_never_stops():
    b = new_exponential_backoff()
    clock = _deterministic(b)
    b.max_elapsed_time = timedelta(0)
    clock.now = 10_000_000.0
    assert b.next_backoff() == b.initial_interval


@pytest.mark.parametrize("draw", [0.0, 0.25, 0.5, 0.999])
def test_randomized_wait_within_bounds(draw):
    b = ExponentialBackOff(
        initial_interval=timedelta(seconds=8),
        randomization_factor=0.5,
        random=lambda: draw,
    )
    wait = b.next_backoff()
    assert b.initial_interval * 0.5 <= wait <= b.initial_interval * 1.5