"""Pytest configuration for nscache tests."""

from collections.abc import Callable
from typing import Any

import pytest

from nscache import MemoryRegistry

START = 1_673_330_000_000


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = START) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeTimer:
    """Timer that only fires when the test says so."""

    def __init__(self, interval: float, function: Callable[[], Any]) -> None:
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.function()


class FakeTimerFactory:
    """Records every timer a sweeper creates."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, interval: float, function: Callable[[], Any]) -> FakeTimer:
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled]

    def fire_pending(self) -> None:
        """Fire the armed timer, as if its interval elapsed."""
        for timer in self.pending:
            timer.fire()


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Give each test a fresh process-wide memory registry."""
    import nscache.infrastructure.backends.memory

    original = nscache.infrastructure.backends.memory._default_registry
    nscache.infrastructure.backends.memory._default_registry = None

    yield

    nscache.infrastructure.backends.memory._default_registry = original


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for testing."""
    return FakeClock()


@pytest.fixture
def timers() -> FakeTimerFactory:
    """Create a fake timer factory for testing."""
    return FakeTimerFactory()


@pytest.fixture
def registry() -> MemoryRegistry:
    """Create an isolated memory registry for testing."""
    return MemoryRegistry()
