"""Exponential back-off policies used when reconnecting."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable


@dataclass
class ExponentialBackOff:
    """Randomised exponential back-off.

    Each call to :meth:`next_backoff` returns the current interval randomised
    by ``randomization_factor`` and then grows the interval by ``multiplier``
    up to ``max_interval``. Once ``max_elapsed_time`` has passed since the last
    reset it returns None to signal that retrying should stop; a zero
    ``max_elapsed_time`` never stops.
    """

    initial_interval: timedelta = timedelta(milliseconds=500)
    randomization_factor: float = 0.5
    multiplier: float = 1.5
    max_interval: timedelta = timedelta(seconds=60)
    max_elapsed_time: timedelta = timedelta(minutes=15)
    clock: Callable[[], float] = time.monotonic
    random: Callable[[], float] = random.random
    current_interval: timedelta = field(init=False)
    start_time: float = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restart from the initial interval and restart the elapsed clock."""
        self.current_interval = self.initial_interval
        self.start_time = self.clock()

    @property
    def elapsed_time(self) -> timedelta:
        return timedelta(seconds=self.clock() - self.start_time)

    def next_backoff(self) -> timedelta | None:
        """Return the next wait, or None once the elapsed limit is reached."""
        elapsed = self.elapsed_time
        wait = self._randomized(self.current_interval)
        self._grow()
        if self.max_elapsed_time and elapsed + wait > self.max_elapsed_time:
            return None
        return wait

    def _randomized(self, interval: timedelta) -> timedelta:
        seconds = interval.total_seconds()
        delta = self.randomization_factor * seconds
        low = seconds - delta
        high = seconds + delta
        return timedelta(seconds=low + self.random() * (high - low))

    def _grow(self) -> None:
        if self.current_interval >= self.max_interval / self.multiplier:
            self.current_interval = self.max_interval
        else:
            self.current_interval = self.current_interval * self.multiplier


def new_exponential_backoff() -> ExponentialBackOff:
    """Back-off for network errors: 5s doubling up to 320s."""
    return ExponentialBackOff(
        initial_interval=timedelta(seconds=5),
        multiplier=2.0,
        max_interval=timedelta(seconds=320),
    )


def new_aggressive_exponential_backoff() -> ExponentialBackOff:
    """Back-off for rate limiting: 1 minute doubling up to 16 minutes."""
    return ExponentialBackOff(
        initial_interval=timedelta(minutes=1),
        multiplier=2.0,
        max_interval=timedelta(minutes=16),
    )