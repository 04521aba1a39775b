"""
Retry decorators built on execute() and execute_async().
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

from ..clock import DEFAULT_CLOCK, Clock, async_sleep_ms, sleep_ms
from .classifiers import Classifier, allow_all
from .config import RetryConfig
from .executor import ErrorTypes, RetryCallback, execute, execute_async

P = ParamSpec("P")
T = TypeVar("T")


def with_retry(
    config: RetryConfig | None = None,
    *,
    allow: Classifier = allow_all,
    retry_on: ErrorTypes = Exception,
    on_retry: RetryCallback | None = None,
    sleep: Callable[[int], None] = sleep_ms,
    clock: Clock = DEFAULT_CLOCK,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Each call of the decorated function gets its own wait stream and state.

    Args:
        config: Retry configuration (default: RetryConfig())
        allow: Classifier deciding whether an error permits another attempt
        retry_on: Exception types that are retried or classified
        on_retry: Optional callback(attempt, exception) called before each retry
        sleep: Sleep collaborator taking milliseconds
        clock: Clock collaborator for expiry mode

    Returns:
        Decorated function that returns the value or raises a RetryError
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            outcome = execute(
                config.wait_stream(),
                allow,
                config.mode(),
                lambda _attempt: func(*args, **kwargs),
                sleep=sleep,
                clock=clock,
                retry_on=retry_on,
                on_retry=on_retry,
            )
            return outcome.unwrap()

        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    *,
    allow: Classifier = allow_all,
    retry_on: ErrorTypes = Exception,
    on_retry: RetryCallback | None = None,
    sleep: Callable[[int], Awaitable[None]] = async_sleep_ms,
    clock: Clock = DEFAULT_CLOCK,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        allow: Classifier deciding whether an error permits another attempt
        retry_on: Exception types that are retried or classified
        on_retry: Optional callback(attempt, exception) called before each retry
        sleep: Async sleep collaborator taking milliseconds
        clock: Clock collaborator for expiry mode

    Returns:
        Decorated async function that returns the value or raises a RetryError
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            outcome = await execute_async(
                config.wait_stream(),
                allow,
                config.mode(),
                lambda _attempt: func(*args, **kwargs),
                sleep=sleep,
                clock=clock,
                retry_on=retry_on,
                on_retry=on_retry,
            )
            return outcome.unwrap()

        return wrapper

    return decorator
