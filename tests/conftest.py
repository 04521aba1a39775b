"""Shared fixtures for retry tests."""

import pytest
from retry_streams.clock import ManualClock


class TransientError(Exception):
    """Error the tests treat as retryable."""


class FatalError(Exception):
    """Error the tests treat as not retryable."""


class RecordingSleep:
    """Sleep collaborator that records requested delays without blocking."""

    def __init__(self):
        self.calls: list[int] = []

    def __call__(self, ms: int) -> None:
        self.calls.append(ms)


class AsyncRecordingSleep(RecordingSleep):
    async def __call__(self, ms: int) -> None:
        self.calls.append(ms)


def failing_then(value, errors):
    """Build an operation that raises each of errors in turn, then returns value."""
    pending = list(errors)

    def operation(attempt):
        if pending:
            raise pending.pop(0)
        return value

    return operation


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def async_sleep():
    return AsyncRecordingSleep()


@pytest.fixture
def clock():
    return ManualClock()
