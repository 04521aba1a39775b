"""
Element-wise transformers over wait streams.

Each transformer returns a new stream and leaves its input untouched.
They compose in any order and any count, and order matters:

    apply_cap(apply_constant(s, 3), 100)  # add, then cap
    apply_constant(apply_cap(s, 100), 3)  # cap, then add
"""

import itertools
import random
from typing import Callable

from .stream import WaitStream


def apply_constant(stream: WaitStream, c: int) -> WaitStream:
    """Add c to every delay."""
    return stream.map(lambda wait: wait + c)


def apply_factor(stream: WaitStream, k: int) -> WaitStream:
    """Multiply every delay by k."""
    return stream.map(lambda wait: wait * k)


def apply_cap(stream: WaitStream, bound: int) -> WaitStream:
    """Clamp every delay to at most bound."""
    return stream.map(lambda wait: min(wait, bound))


def apply_jitter(
    stream: WaitStream,
    upper_bound: int,
    *,
    randbelow: Callable[[int], int] | None = None,
) -> WaitStream:
    """
    Add a uniformly random integer in [1, upper_bound] to every delay.

    A fresh value is drawn on every pull.

    Args:
        stream: Stream to perturb
        upper_bound: Largest jitter that may be added (must be >= 1)
        randbelow: Source of integers in [0, bound) (default: random.randrange)

    Returns:
        Jittered stream
    """
    if upper_bound < 1:
        raise ValueError(f"Jitter upper bound must be >= 1, got {upper_bound}")
    draw = randbelow or random.randrange
    return stream.map(lambda wait: wait + draw(upper_bound) + 1)


def apply_limit(stream: WaitStream, n: int) -> WaitStream:
    """Truncate the stream to at most n delays."""
    count = max(0, n)
    return WaitStream(lambda: itertools.islice(iter(stream), count))
