"""
Common allow predicates.

A classifier receives each error the operation raises and returns True to
permit another attempt or False to stop with UnallowedError.
"""

from typing import Callable

Classifier = Callable[[BaseException], bool]


def allow_all(error: BaseException) -> bool:
    """Retry on every error."""
    return True


def allow_retryable(error: BaseException) -> bool:
    """Retry only errors that carry a truthy `retryable` attribute."""
    return bool(getattr(error, "retryable", False))


def allow_types(*types: type[BaseException]) -> Classifier:
    """Retry only errors that are instances of one of types."""

    def classify(error: BaseException) -> bool:
        return isinstance(error, types)

    return classify
