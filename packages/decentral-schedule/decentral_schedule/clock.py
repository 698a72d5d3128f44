"""Millisecond clocks for the scheduler and reducer."""
from __future__ import annotations

from typing import Callable

from decentral.reducer import monotonic_ms

Clock = Callable[[], float]


class MonotonicClock:
    """Real time in milliseconds on the ``time.monotonic`` timeline.

    Shares its timeline with the default clock of ``make_reducer``.
    """

    def __call__(self) -> float:
        return monotonic_ms()


class ManualClock:
    """Clock that only moves when told to. Used to drive timers in tests."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount: {ms}")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError(f"Clock cannot go backwards ({self._now} -> {ms})")
        self._now = float(ms)
