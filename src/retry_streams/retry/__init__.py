"""
retry-streams - Retry Execution.

Stopping policies, the attempt loop, configuration and decorators.
"""

from .modes import MaxAttempts, Expiry, Mode
from .outcome import RetryOutcome
from .classifiers import allow_all, allow_retryable, allow_types
from .executor import execute, execute_async, prepare_waits
from .config import RetryConfig, BackoffKind
from .decorators import with_retry, async_with_retry

__all__ = [
    "MaxAttempts",
    "Expiry",
    "Mode",
    "RetryOutcome",
    "allow_all",
    "allow_retryable",
    "allow_types",
    "execute",
    "execute_async",
    "prepare_waits",
    "RetryConfig",
    "BackoffKind",
    "with_retry",
    "async_with_retry",
]
