"""Wall-clock stopwatch reporting whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """A start/stop stopwatch that refuses to be started or read out of turn."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start_ns = 0
        self._end_ns = 0
        self._running = False

    @property
    def running(self) -> bool:
        """Whether the timer has been started and not yet stopped."""
        return self._running

    def reset(self) -> None:
        """Clear both time points and stop the timer."""
        self._start_ns = 0
        self._end_ns = 0
        self._running = False

    def start(self) -> None:
        """Record the start time."""
        if self._running:
            raise RuntimeError("Timer already started!")
        self._start_ns = self._clock()
        self._running = True

    def stop(self) -> None:
        """Record the end time."""
        if not self._running:
            raise RuntimeError("Timer not started!")
        self._end_ns = self._clock()
        self._running = False

    def result(self) -> int:
        """Return the measured time in whole milliseconds."""
        if self._running:
            raise RuntimeError("Timer still running!")
        return (self._end_ns - self._start_ns) // 1_000_000