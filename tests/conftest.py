"""Shared fixtures: a controllable clock and a controller driven by it."""

import pytest

from engine import PlaybackController, PolledScheduler


class FakeClock:
    """Monotonic clock in seconds that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return PolledScheduler(clock)


@pytest.fixture
def controller(scheduler):
    return PlaybackController(scheduler, interval_ms=600)


@pytest.fixture
def tick(clock, scheduler, controller):
    """Advance the clock by one controller interval and fire what is due."""

    def _tick(times: int = 1) -> int:
        fired = 0
        for _ in range(times):
            clock.advance(controller.interval_ms)
            fired += scheduler.poll()
        return fired

    return _tick
