"""
Declarative settings that build a wait stream and a stopping policy.

RetryConfig is the dataclass form of an execute() call: backoff shape,
cap and jitter produce the WaitStream, and the attempt or expiry ceiling
produces the Mode.
"""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import ConfigurationError
from ..waits import (
    WaitStream,
    constant_backoff,
    exponential_backoff,
    linear_backoff,
    no_backoff,
)
from .modes import Expiry, MaxAttempts, Mode

DEFAULT_MAX_ATTEMPTS = 5


class BackoffKind(str, Enum):
    """Available backoff shapes."""

    NONE = "none"  # delay = 0
    CONSTANT = "constant"  # delay = base
    LINEAR = "linear"  # delay = base + step * retry
    EXPONENTIAL = "exponential"  # delay = base * (factor ** retry)


@dataclass
class RetryConfig:
    """
    Declarative retry settings.

    At most one of max_attempts and expiry_ms may be set; when neither is,
    max_attempts falls back to DEFAULT_MAX_ATTEMPTS.

    Attributes:
        strategy: Backoff shape (default: exponential)
        base_delay_ms: First delay in milliseconds (default: 500)
        step_ms: Increment for linear backoff (default: 500)
        factor: Multiplier for exponential backoff (default: 2)
        max_delay_ms: Cap applied to every delay, None for no cap (default: 30000)
        jitter_ms: Largest random delay added, 0 disables jitter (default: 100)
        max_attempts: Attempt ceiling (default: 5 unless expiry_ms is set)
        expiry_ms: Wall-clock ceiling in milliseconds (default: None)
    """

    strategy: BackoffKind = BackoffKind.EXPONENTIAL
    base_delay_ms: int = 500
    step_ms: int = 500
    factor: int = 2
    max_delay_ms: int | None = 30_000
    jitter_ms: int = 100
    max_attempts: int | None = None
    expiry_ms: int | None = None

    def __post_init__(self) -> None:
        self.strategy = BackoffKind(self.strategy)
        if self.max_attempts is not None and self.expiry_ms is not None:
            raise ConfigurationError(
                "max_attempts and expiry_ms are mutually exclusive",
                field="max_attempts",
            )
        if self.max_attempts is None and self.expiry_ms is None:
            self.max_attempts = DEFAULT_MAX_ATTEMPTS
        for name in ("base_delay_ms", "step_ms", "jitter_ms"):
            if getattr(self, name) < 0:
                raise ConfigurationError("must not be negative", field=name)
        if self.factor < 1:
            raise ConfigurationError("must be >= 1", field="factor")
        if self.max_delay_ms is not None and self.max_delay_ms < 0:
            raise ConfigurationError("must not be negative", field="max_delay_ms")

    def wait_stream(self) -> WaitStream:
        """Build the wait stream: backoff, then cap, then jitter."""
        if self.strategy == BackoffKind.EXPONENTIAL:
            stream = exponential_backoff(self.base_delay_ms, self.factor)
        elif self.strategy == BackoffKind.LINEAR:
            stream = linear_backoff(self.base_delay_ms, self.step_ms)
        elif self.strategy == BackoffKind.CONSTANT:
            stream = constant_backoff(self.base_delay_ms)
        else:  # NONE
            stream = no_backoff()

        if self.max_delay_ms is not None:
            stream = stream.cap(self.max_delay_ms)
        if self.jitter_ms > 0:
            stream = stream.jitter(self.jitter_ms)
        return stream

    def mode(self) -> Mode:
        if self.expiry_ms is not None:
            return Expiry(self.expiry_ms)
        return MaxAttempts(self.max_attempts)  # type: ignore[arg-type]

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """10 attempts, exponential from 1s, capped at 2 minutes."""
        return cls(
            max_attempts=10,
            base_delay_ms=1_000,
            max_delay_ms=120_000,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """3 attempts, exponential from 250ms, capped at 10s."""
        return cls(
            max_attempts=3,
            base_delay_ms=250,
            max_delay_ms=10_000,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """One attempt, no waiting, no jitter."""
        return cls(strategy=BackoffKind.NONE, jitter_ms=0, max_attempts=1)

    @classmethod
    def expiring(cls, expiry_ms: int) -> "RetryConfig":
        """Default backoff, retried until expiry_ms milliseconds have elapsed."""
        return cls(expiry_ms=expiry_ms)
