"""
Lazy wait-time streams and their generators.

A WaitStream is a recipe for a sequence of millisecond delays. Iterating it
derives a fresh generator, so a stream can be consumed once per iteration
and re-derived as often as needed, but a started iterator cannot be rewound.
Values are raw: backoff math may produce negatives or very large numbers,
and clamping happens only where the retry loop uses them.
"""

import itertools
from typing import Callable, Iterable, Iterator


class WaitStream:
    """
    Opaque, re-derivable sequence of delays in milliseconds.

    Build one with a generator function (constant_backoff, exponential_backoff,
    ...) and refine it with the chainable transformer methods:

        waits = exponential_backoff(500, 2).cap(1000).jitter(50)
    """

    def __init__(self, factory: Callable[[], Iterator[int]]):
        self._factory = factory

    def __iter__(self) -> Iterator[int]:
        return self._factory()

    def map(self, fn: Callable[[int], int]) -> "WaitStream":
        """Return a stream whose elements are fn applied to this stream's elements."""
        return WaitStream(lambda: map(fn, self._factory()))

    def take(self, n: int) -> list[int]:
        """Materialise the first n elements of a fresh iteration."""
        return list(itertools.islice(self, max(0, n)))

    # Chainable transformers; see transformers.py.

    def constant(self, c: int) -> "WaitStream":
        from .transformers import apply_constant

        return apply_constant(self, c)

    def factor(self, k: int) -> "WaitStream":
        from .transformers import apply_factor

        return apply_factor(self, k)

    def cap(self, bound: int) -> "WaitStream":
        from .transformers import apply_cap

        return apply_cap(self, bound)

    def jitter(self, upper_bound: int, randbelow: Callable[[int], int] | None = None) -> "WaitStream":
        from .transformers import apply_jitter

        return apply_jitter(self, upper_bound, randbelow=randbelow)

    def limit(self, n: int) -> "WaitStream":
        from .transformers import apply_limit

        return apply_limit(self, n)


def _unfold(seed: int, step: Callable[[int], int]) -> Iterator[int]:
    current = seed
    while True:
        yield current
        current = step(current)


def iterate_backoff(seed: int, step: Callable[[int], int]) -> WaitStream:
    """
    Build an infinite stream: seed, step(seed), step(step(seed)), ...

    Every backoff shape below is a special case of this one.
    """
    return WaitStream(lambda: _unfold(seed, step))


def no_backoff() -> WaitStream:
    """Never wait."""
    return iterate_backoff(0, lambda _: 0)


def constant_backoff(wait_ms: int) -> WaitStream:
    """Wait the same wait_ms before every retry."""
    return iterate_backoff(wait_ms, lambda previous: previous)


def linear_backoff(wait_ms: int, step_ms: int) -> WaitStream:
    """Start at wait_ms and grow by step_ms per retry."""
    return iterate_backoff(wait_ms, lambda previous: previous + step_ms)


def exponential_backoff(wait_ms: int, factor: int) -> WaitStream:
    """Start at wait_ms and multiply by factor per retry."""
    return iterate_backoff(wait_ms, lambda previous: previous * factor)


def custom_backoff(wait_ms: int, fn: Callable[[int], int]) -> WaitStream:
    """
    Start at wait_ms and derive each delay from the previous one with fn.

    fn sees the unclamped previous value; clamp inside fn if negative
    feedback is not wanted.
    """
    return iterate_backoff(wait_ms, fn)


def fixed_waits(values: Iterable[int]) -> WaitStream:
    """Bounded stream over explicit delays."""
    frozen = tuple(values)
    return WaitStream(lambda: iter(frozen))
