"""Monotonic session timer with HH:MM:SS formatting."""
from __future__ import annotations
import time
from typing import Callable


def format_elapsed(seconds: float) -> str:
    """Format a duration as HH:MM:SS (hours are not wrapped at 24)."""
    total = int(max(0.0, seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class Stopwatch:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._started: float | None = None
        self._stopped: float | None = None

    @property
    def running(self) -> bool:
        return self._started is not None and self._stopped is None

    def start(self) -> None:
        if self._started is not None:
            raise RuntimeError("Stopwatch already started")
        self._started = self._clock()

    def stop(self) -> float:
        """Stop the watch and return the elapsed seconds."""
        if not self.running:
            raise RuntimeError("Stopwatch is not running")
        self._stopped = self._clock()
        return self.elapsed()

    def elapsed(self) -> float:
        if self._started is None:
            return 0.0
        end = self._stopped if self._stopped is not None else self._clock()
        return end - self._started

    def formatted(self) -> str:
        return format_elapsed(self.elapsed())
