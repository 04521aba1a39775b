"""
retry-streams - Retry Execution Engine.

Retry a fallible operation over a lazy, composable wait-time stream with an
attempt or expiry ceiling and an allow/deny classifier over errors.
"""

from .clock import Clock, SystemClock, ManualClock, DEFAULT_CLOCK, sleep_ms, async_sleep_ms
from .exceptions import (
    RetryError,
    RetriesExhausted,
    TimeExhausted,
    UnallowedError,
    ConfigurationError,
)
from .waits import (
    WaitStream,
    iterate_backoff,
    no_backoff,
    constant_backoff,
    linear_backoff,
    exponential_backoff,
    custom_backoff,
    fixed_waits,
    apply_constant,
    apply_factor,
    apply_cap,
    apply_jitter,
    apply_limit,
)
from .retry import (
    MaxAttempts,
    Expiry,
    Mode,
    RetryOutcome,
    allow_all,
    allow_retryable,
    allow_types,
    execute,
    execute_async,
    RetryConfig,
    BackoffKind,
    with_retry,
    async_with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clock
    "Clock",
    "SystemClock",
    "ManualClock",
    "DEFAULT_CLOCK",
    "sleep_ms",
    "async_sleep_ms",
    # Exceptions
    "RetryError",
    "RetriesExhausted",
    "TimeExhausted",
    "UnallowedError",
    "ConfigurationError",
    # Wait streams
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
    # Retry
    "MaxAttempts",
    "Expiry",
    "Mode",
    "RetryOutcome",
    "allow_all",
    "allow_retryable",
    "allow_types",
    "execute",
    "execute_async",
    "RetryConfig",
    "BackoffKind",
    "with_retry",
    "async_with_retry",
]
