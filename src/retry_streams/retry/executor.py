"""
The retry loop.

execute() drives one operation through its attempts: pull a delay from the
wait stream, sleep, measure elapsed time (expiry mode), run the operation,
classify any failure, and either stop or go round again. Every terminal
state comes back as a RetryOutcome; nothing is raised for exhaustion or
rejection.
"""

import itertools
import logging
from typing import Awaitable, Callable, Iterable, Iterator, TypeVar, Generic

from ..clock import DEFAULT_CLOCK, Clock, async_sleep_ms, sleep_ms
from ..exceptions import UnallowedError
from .classifiers import Classifier
from .modes import Mode
from .outcome import RetryOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorTypes = type[BaseException] | tuple[type[BaseException], ...]
RetryCallback = Callable[[int, BaseException], None]


def prepare_waits(wait_stream: Iterable[int], mode: Mode) -> Iterator[int]:
    """
    Turn a caller's wait stream into the delays the loop will apply.

    A leading 0 is prepended so the first attempt never waits, every value
    is clamped to >= 0 as it is pulled, and MaxAttempts truncates the result
    to its ceiling.
    """
    waits = (max(0, wait) for wait in itertools.chain((0,), wait_stream))
    return mode.bound(waits)


class _Execution(Generic[T]):
    """Mutable state owned by a single execute() call."""

    def __init__(
        self,
        wait_stream: Iterable[int],
        allow: Classifier,
        mode: Mode,
        clock: Clock,
        on_retry: RetryCallback | None = None,
    ):
        self.allow = allow
        self.on_retry = on_retry
        self.mode = mode
        self.clock = clock
        self.attempt = 0
        self.wait_times: list[int] = []
        self.errors: list[BaseException] = []
        self.elapsed_ms: int | None = None
        self._start = 0
        self._pending: BaseException | None = None
        self._waits = prepare_waits(wait_stream, mode)

        if mode.tracks_time:
            self.elapsed_ms = 0
            if mode.permits(0, 0):
                self._start = clock.now()

    def next_wait(self) -> int | None:
        """Delay before the next attempt, or None when no attempt may start."""
        if not self.mode.permits(self.attempt, self.elapsed_ms):
            return None
        wait = next(self._waits, None)
        if wait is not None and self._pending is not None:
            self._notify_retry(self._pending, wait)
        return wait

    def waited(self, wait: int) -> None:
        self.wait_times.append(wait)
        if self.mode.tracks_time:
            self.elapsed_ms = self.clock.now() - self._start
        logger.debug(f"Starting attempt {self.attempt + 1} after waiting {wait}ms")

    def succeeded(self, value: T) -> RetryOutcome[T]:
        return RetryOutcome(value=value, wait_times=self.wait_times, elapsed_ms=self.elapsed_ms)

    def failed(self, error: BaseException) -> RetryOutcome[T] | None:
        """Record a failure; return a terminal outcome if the classifier rejects it."""
        self.errors.append(error)
        if self.allow(error):
            self._pending = error
            self.attempt += 1
            return None
        logger.info(f"Attempt {self.attempt + 1} failed with unallowed error: {error!r}")
        return RetryOutcome(
            error=UnallowedError(error),
            wait_times=self.wait_times,
            elapsed_ms=self.elapsed_ms,
        )

    def _notify_retry(self, error: BaseException, wait: int) -> None:
        # Only reached once another attempt is certain to start.
        self._pending = None
        if self.on_retry:
            self.on_retry(self.attempt - 1, error)
        else:
            logger.warning(f"Attempt {self.attempt} failed: {error!r}, retrying in {wait}ms")

    def exhausted(self) -> RetryOutcome[T]:
        error = self.mode.exhausted(self.errors)
        if self.errors:
            logger.info(f"Giving up: {error}")
        return RetryOutcome(error=error, wait_times=self.wait_times, elapsed_ms=self.elapsed_ms)


def execute(
    wait_stream: Iterable[int],
    allow: Classifier,
    mode: Mode,
    operation: Callable[[int], T],
    *,
    sleep: Callable[[int], None] = sleep_ms,
    clock: Clock = DEFAULT_CLOCK,
    retry_on: ErrorTypes = Exception,
    on_retry: RetryCallback | None = None,
) -> RetryOutcome[T]:
    """
    Run operation until it succeeds, the classifier rejects an error, or
    the stopping policy forbids another attempt.

    Args:
        wait_stream: Delays in milliseconds between attempts
        allow: Classifier deciding whether an error permits another attempt
        mode: MaxAttempts or Expiry
        operation: Called with the zero-based attempt index
        sleep: Blocking sleep taking milliseconds (default: time.sleep based)
        clock: Millisecond clock, read only in expiry mode
        retry_on: Exception types that form the operation's error channel;
            anything else propagates unchanged
        on_retry: Optional callback(attempt, error) called before each retry

    Returns:
        RetryOutcome holding either the value or a RetryError
    """
    state: _Execution[T] = _Execution(wait_stream, allow, mode, clock, on_retry)

    while True:
        wait = state.next_wait()
        if wait is None:
            return state.exhausted()

        sleep(wait)
        state.waited(wait)

        try:
            value = operation(state.attempt)
        except retry_on as e:
            outcome = state.failed(e)
            if outcome is not None:
                return outcome
        else:
            return state.succeeded(value)


async def execute_async(
    wait_stream: Iterable[int],
    allow: Classifier,
    mode: Mode,
    operation: Callable[[int], Awaitable[T]],
    *,
    sleep: Callable[[int], Awaitable[None]] = async_sleep_ms,
    clock: Clock = DEFAULT_CLOCK,
    retry_on: ErrorTypes = Exception,
    on_retry: RetryCallback | None = None,
) -> RetryOutcome[T]:
    """
    Async counterpart of execute().

    The operation and the sleep are awaited; attempts remain strictly
    sequential.
    """
    state: _Execution[T] = _Execution(wait_stream, allow, mode, clock, on_retry)

    while True:
        wait = state.next_wait()
        if wait is None:
            return state.exhausted()

        await sleep(wait)
        state.waited(wait)

        try:
            value = await operation(state.attempt)
        except retry_on as e:
            outcome = state.failed(e)
            if outcome is not None:
                return outcome
        else:
            return state.succeeded(value)
