"""Microsecond stopwatch."""

from __future__ import annotations

import time
from typing import Callable

_WRAP = 1 << 32


def _micros() -> int:
    return time.perf_counter_ns() // 1000


class SimpleTimer:
    """Measures time between begin() and elapsed() in microseconds.

    Differences wrap at 2**32, as with a 32-bit microsecond counter.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _micros
        self._begin = 0
        self._duration = 0

    def begin(self) -> None:
        """Start measuring from now."""
        self._begin = self._clock()

    def elapsed(self) -> int:
        """Record and return the time since begin()."""
        self._duration = (self._clock() - self._begin) % _WRAP
        return self._duration

    @property
    def duration(self) -> int:
        """The time recorded by the last call to elapsed()."""
        return self._duration