"""
Stopping policies.

A Mode decides whether another attempt may start. MaxAttempts counts
attempts; Expiry compares elapsed wall-clock time against a deadline.
"""

import itertools
from dataclasses import dataclass
from typing import Iterator, Union

from ..exceptions import RetriesExhausted, TimeExhausted, RetryError


@dataclass(frozen=True)
class MaxAttempts:
    """Allow at most n attempts in total (n <= 0 allows none)."""

    n: int

    tracks_time = False

    def permits(self, attempt: int, elapsed_ms: int | None) -> bool:
        return attempt < self.n

    def bound(self, waits: Iterator[int]) -> Iterator[int]:
        """Truncate the wait stream to exactly n delays."""
        return itertools.islice(waits, max(0, self.n))

    def exhausted(self, errors: list[BaseException]) -> RetryError:
        return RetriesExhausted(errors)


@dataclass(frozen=True)
class Expiry:
    """
    Allow attempts while elapsed time is strictly below duration_ms.

    The check runs before an attempt's wait is issued. Once an attempt has
    started, its wait and its operation run to completion even if they push
    elapsed time past the deadline.
    """

    duration_ms: int

    tracks_time = True

    def permits(self, attempt: int, elapsed_ms: int | None) -> bool:
        return self.duration_ms > 0 and (elapsed_ms or 0) < self.duration_ms

    def bound(self, waits: Iterator[int]) -> Iterator[int]:
        return waits

    def exhausted(self, errors: list[BaseException]) -> RetryError:
        return TimeExhausted(errors)


Mode = Union[MaxAttempts, Expiry]
