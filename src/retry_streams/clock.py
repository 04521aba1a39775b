"""
Clock and sleep collaborators for the retry loop.

The loop never touches time directly. It reads a Clock (expiry mode only)
and calls a sleep function with a whole number of milliseconds. Production
code uses SystemClock and sleep_ms; tests inject ManualClock and a no-op or
recording sleep.
"""

import asyncio
import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic millisecond clock."""

    def now(self) -> int:
        """
        Return the current instant in milliseconds.

        Only differences between two readings are meaningful.
        """
        ...


class SystemClock:
    """Clock backed by time.monotonic_ns()."""

    def now(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """
    Clock that only moves when told to.

    Example:
        clock = ManualClock()
        outcome = execute(
            constant_backoff(100),
            allow_all,
            Expiry(300),
            operation,
            sleep=clock.advance,
            clock=clock,
        )
    """

    def __init__(self, start: int = 0):
        self._current = start

    def now(self) -> int:
        return self._current

    def advance(self, ms: int) -> None:
        """Move the clock forward by ms milliseconds."""
        if ms < 0:
            raise ValueError(f"Cannot advance clock by negative amount: {ms}")
        self._current += ms


def sleep_ms(ms: int) -> None:
    """Block for ms milliseconds."""
    time.sleep(ms / 1000)


async def async_sleep_ms(ms: int) -> None:
    """Suspend the current task for ms milliseconds."""
    await asyncio.sleep(ms / 1000)


DEFAULT_CLOCK: Clock = SystemClock()
