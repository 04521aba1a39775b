"""
Result of a retry execution.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..exceptions import RetryError

T = TypeVar("T")


@dataclass(frozen=True)
class RetryOutcome(Generic[T]):
    """
    Terminal state of one execute() call.

    Attributes:
        value: Operation result (meaningful only when succeeded)
        error: Terminal failure, or None on success
        wait_times: Delays actually applied, in attempt order, starting with 0
        elapsed_ms: Total measured time in expiry mode, otherwise None
    """

    value: T | None = None
    error: RetryError | None = None
    wait_times: tuple[int, ...] = ()
    elapsed_ms: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "wait_times", tuple(self.wait_times))

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def attempts(self) -> int:
        """Number of attempts that were started."""
        return len(self.wait_times)

    def unwrap(self) -> T:
        """Return the value, or raise the terminal RetryError."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
