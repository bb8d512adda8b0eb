"""
Clock abstractions and an elapsed-time stopwatch.

This module provides a simple, testable way to measure durations via a clock
object rather than calling time.perf_counter() directly. Production code uses
the real monotonic clock; tests pass a FrozenClock and advance it by hand, so
elapsed-time assertions are exact instead of depending on the scheduler.
"""

import time
from typing import Optional, Protocol


class Clock(Protocol):
    """
    Abstract monotonic time source.

    **Conceptual**: A Clock answers "how many seconds have passed on some
    fixed, never-decreasing scale?" The absolute value means nothing; only
    differences between two readings do.

    **Usage**: Consumers accept a Clock (constructor or function parameter)
    and call clock.now() whenever they need an instant. In production pass a
    MonotonicClock; in tests pass a FrozenClock.
    """

    def now(self) -> float:
        """
        Return the current instant in seconds.

        Returns:
            Float seconds on a monotonic scale.
        """
        ...


class MonotonicClock:
    """
    Clock backed by time.perf_counter().

    perf_counter is monotonic and has the highest available resolution,
    so it is the right source for short elapsed-time measurements.
    """

    def now(self) -> float:
        return time.perf_counter()


class FrozenClock:
    """
    Clock that returns a fixed instant until explicitly advanced.

    **Usage**:
        clock = FrozenClock()
        sw = Stopwatch(clock)
        clock.advance(1.5)
        sw.elapsed()  # exactly 1.5
    """

    def __init__(self, fixed_now: float = 0.0):
        """
        Initialize a FrozenClock at a fixed instant.

        Args:
            fixed_now: The value returned by now() until advance() is called.
        """
        self._fixed_now = float(fixed_now)

    def now(self) -> float:
        return self._fixed_now

    def advance(self, seconds: float) -> None:
        """
        Move the frozen instant forward.

        Raises:
            ValueError: If seconds is negative (clocks never go backwards).
        """
        if seconds < 0:
            raise ValueError(f"cannot advance a clock by a negative amount: {seconds}")
        self._fixed_now += seconds


def get_real_clock() -> Clock:
    """Factory for the production monotonic clock."""
    return MonotonicClock()


def get_frozen_clock(fixed_now: float = 0.0) -> Clock:
    """Factory for a FrozenClock starting at `fixed_now`."""
    return FrozenClock(fixed_now)


class Stopwatch:
    """
    Measure elapsed time since construction or the last reset().

    **Functionally**:
    - The starting instant is captured when the stopwatch is created.
    - reset() captures a new starting instant.
    - elapsed() returns float seconds since the starting instant. It never
      returns a negative value and has no side effects, so it can be called
      any number of times.
    - Used as a context manager the stopwatch is reset on entry, which makes
      `with Stopwatch() as sw: ...` time exactly the block.

    Each instance is owned by its caller; instances are not shared between
    threads.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock if clock is not None else get_real_clock()
        self._start = self._clock.now()

    def reset(self) -> None:
        self._start = self._clock.now()

    def elapsed(self) -> float:
        return max(0.0, self._clock.now() - self._start)

    def __enter__(self) -> "Stopwatch":
        self.reset()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed():.6f}s)"
