"""Wall-clock timer and frame time step."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        self._start = self._clock()

    def elapsed_millis(self) -> float:
        return (self._clock() - self._start) * 1000.0

    def elapsed_seconds(self) -> float:
        return self.elapsed_millis() / 1000.0


class Timestep:
    """Delta between successive update times, in milliseconds."""

    def __init__(self, initial: float) -> None:
        self._delta = 0.0
        self._last = initial

    def update(self, current: float) -> None:
        self._delta = current - self._last
        # The stored reference becomes the delta itself, not the current time.
        self._last = self._delta

    @property
    def millis(self) -> float:
        return self._delta

    def seconds(self) -> float:
        return self._delta * 0.001