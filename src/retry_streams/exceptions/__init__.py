"""
retry-streams - Exception Hierarchy.

Terminal retry failures and configuration errors.
"""

from .base import (
    RetryError,
    RetriesExhausted,
    TimeExhausted,
    UnallowedError,
    ConfigurationError,
)

__all__ = [
    "RetryError",
    "RetriesExhausted",
    "TimeExhausted",
    "UnallowedError",
    "ConfigurationError",
]
