"""
Terminal error classes for retry execution.

A RetryError is the failure half of a RetryOutcome. The loop returns these
as values; RetryOutcome.unwrap() and the decorators raise them.
"""


class RetryError(Exception):
    """Base class for every terminal retry failure."""

    def __init__(self, message: str, *, errors: list[BaseException] | None = None):
        super().__init__(message)
        self.message = message
        self.errors: list[BaseException] = list(errors) if errors else []

    @property
    def attempts(self) -> int:
        """Number of failed attempts carried by this error."""
        return len(self.errors)

    @property
    def last_error(self) -> BaseException | None:
        return self.errors[-1] if self.errors else None

    def __str__(self) -> str:
        parts = [self.message]
        if self.errors:
            parts.append(f"after {self.attempts} attempt(s)")
            parts.append(f"(last error: {self.last_error!r})")
        return " ".join(parts)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash((type(self), len(self.errors)))


class RetriesExhausted(RetryError):
    """The attempt ceiling was reached without success."""

    def __init__(self, errors: list[BaseException] | None = None):
        super().__init__("Retries exhausted", errors=errors)


class TimeExhausted(RetryError):
    """The expiry ceiling was reached without success."""

    def __init__(self, errors: list[BaseException] | None = None):
        super().__init__("Time exhausted", errors=errors)


class UnallowedError(RetryError):
    """
    The classifier rejected an error.

    Carries only the rejected error, not the history that led to it.
    """

    def __init__(self, error: BaseException):
        super().__init__("Unallowed error", errors=[error])
        self.error = error

    def __str__(self) -> str:
        return f"{self.message}: {self.error!r}"


class ConfigurationError(ValueError):
    """Raised when a RetryConfig holds an invalid combination of settings."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
