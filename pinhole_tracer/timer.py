"""Wall-clock timing of program stages."""

from __future__ import annotations

import time
from enum import Enum
from typing import Optional, Union


class TimeUnit(Enum):
    """A unit of time, valued in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60_000_000_000


class Timer:
    """Measures the time from creation until ``stop_clock``, in whole units."""

    def __init__(self, unit: TimeUnit = TimeUnit.SECONDS) -> None:
        self.unit = unit
        self._start = time.monotonic_ns()
        self._end: Optional[int] = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_clock()

    def stop_clock(self) -> None:
        """Record the end time; a later call replaces the earlier one."""
        self._end = time.monotonic_ns()

    @property
    def time_difference(self) -> float:
        """Elapsed time truncated to whole units of ``unit``."""
        if self._end is None:
            raise RuntimeError("timer has not been stopped")
        return float((self._end - self._start) // self.unit.value)


def log_context(context_name: str, time_unit: str, duration: Union[int, float]) -> None:
    """Print how long a named stage took."""
    shown = f"{duration:g}" if isinstance(duration, float) else str(duration)
    print(f"System - {context_name} - duration: {shown}{time_unit}")