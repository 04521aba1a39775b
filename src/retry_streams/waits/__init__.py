"""
retry-streams - Wait Streams.

Lazy delay sequences: backoff generators and composable transformers.
"""

from .stream import (
    WaitStream,
    iterate_backoff,
    no_backoff,
    constant_backoff,
    linear_backoff,
    exponential_backoff,
    custom_backoff,
    fixed_waits,
)
from .transformers import (
    apply_constant,
    apply_factor,
    apply_cap,
    apply_jitter,
    apply_limit,
)

__all__ = [
    "WaitStream",
    "iterate_backoff",
    "no_backoff",
    "constant_backoff",
    "linear_backoff",
    "exponential_backoff",
    "custom_backoff",
    "fixed_waits",
    "apply_constant",
    "apply_factor",
    "apply_cap",
    "apply_jitter",
    "apply_limit",
]
