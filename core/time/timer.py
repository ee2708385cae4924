"""
core.time.timer

Stopwatch measuring wall-clock durations with `time.perf_counter`.
The elapsed time is rendered with the same format ids as `Now.time`.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Optional


ELAPSED_FORMATS = {
    0: "{h:02d}:{m:02d}:{s:02d}",
    1: "{h:02d}{m:02d}{s:02d}",
    -1: "{h:02d}_{m:02d}_{s:02d}",
}


def format_elapsed(elapsed: timedelta, fmt: int = 1) -> str:
    """Render a duration as hours/minutes/seconds.

    Hours wrap at 24 like a time-of-day; anything below a second is dropped.
    """
    total = int(elapsed.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    template = ELAPSED_FORMATS.get(fmt, ELAPSED_FORMATS[1])
    return template.format(h=hours % 24, m=minutes, s=seconds)


class Timer:
    """Start/stop/reset stopwatch.

    Elapsed time accumulates across start/stop pairs until `reset()`.
    """

    def __init__(self, counter: Optional[Callable[[], float]] = None) -> None:
        self._counter = counter or time.perf_counter
        self._accumulated = 0.0
        self._started_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> timedelta:
        seconds = self._accumulated
        if self._started_at is not None:
            seconds += self._counter() - self._started_at
        return timedelta(seconds=seconds)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._counter()

    def stop(self, fmt: int = 1) -> str:
        """Stop the timer and return the elapsed time as a string.

        A timer that was never started is started and stopped on the spot.
        """
        if self._started_at is None:
            self.start()

        self._accumulated += self._counter() - self._started_at
        self._started_at = None
        return format_elapsed(self.elapsed, fmt)

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None
