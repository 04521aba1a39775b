from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from retry_streams.clock import ManualClock
from retry_streams.exceptions import RetriesExhausted, TimeExhausted, UnallowedError
from retry_streams.retry import Expiry, MaxAttempts, RetryOutcome, execute
from retry_streams.waits import apply_cap, apply_constant, fixed_waits

_DELAYS = st.lists(st.integers(min_value=-1_000, max_value=1_000), min_size=0, max_size=20)


class _Fails(Exception):
    pass


def _never_called(attempt: int) -> None:
    raise AssertionError("operation must not run")


def _scripted(results: list[bool]):
    """Operation that fails while results[k] is False and succeeds otherwise."""

    def operation(attempt: int) -> int:
        if attempt < len(results) and not results[attempt]:
            raise _Fails(attempt)
        return attempt

    return operation


@given(st.integers(max_value=0), _DELAYS)
def test_non_positive_attempt_ceiling_makes_no_attempts(n: int, delays: list[int]) -> None:
    outcome = execute(fixed_waits(delays), lambda e: True, MaxAttempts(n), _never_called, sleep=lambda _: None)

    assert outcome.error == RetriesExhausted([])
    assert outcome.wait_times == ()


@given(st.integers(max_value=0), _DELAYS)
def test_non_positive_expiry_makes_no_attempts(expiry: int, delays: list[int]) -> None:
    clock = ManualClock()
    outcome = execute(
        fixed_waits(delays), lambda e: True, Expiry(expiry), _never_called, sleep=clock.advance, clock=clock
    )

    assert outcome.error == TimeExhausted([])
    assert outcome.wait_times == ()
    assert outcome.elapsed_ms == 0


@given(_DELAYS, st.integers(min_value=1, max_value=25), st.lists(st.booleans(), max_size=25))
def test_wait_times_start_at_zero_and_are_never_negative(
    delays: list[int], n: int, results: list[bool]
) -> None:
    outcome = execute(fixed_waits(delays), lambda e: True, MaxAttempts(n), _scripted(results), sleep=lambda _: None)

    assert outcome.wait_times[0] == 0
    assert outcome.wait_times[1:] == tuple(max(0, d) for d in delays)[: len(outcome.wait_times) - 1]
    assert len(outcome.wait_times) <= n


@given(
    _DELAYS,
    st.one_of(st.builds(MaxAttempts, st.integers(-3, 10)), st.builds(Expiry, st.integers(-100, 2_000))),
    st.lists(st.booleans(), max_size=25),
    st.sets(st.integers(0, 25)),
)
def test_exactly_one_terminal_outcome(delays, mode, results, rejected) -> None:
    clock = ManualClock()
    outcome: RetryOutcome[int] = execute(
        fixed_waits(delays),
        lambda e: e.args[0] not in rejected,
        mode,
        _scripted(results),
        sleep=clock.advance,
        clock=clock,
    )

    terminal = [
        outcome.succeeded,
        isinstance(outcome.error, RetriesExhausted),
        isinstance(outcome.error, TimeExhausted),
        isinstance(outcome.error, UnallowedError),
    ]
    assert terminal.count(True) == 1
    if isinstance(outcome.error, RetriesExhausted):
        assert isinstance(mode, MaxAttempts)
    if isinstance(outcome.error, TimeExhausted):
        assert isinstance(mode, Expiry)


@given(st.lists(st.integers(min_value=0, max_value=500), min_size=1, max_size=20))
def test_cap_then_constant_differs_from_constant_then_cap(delays: list[int]) -> None:
    capped_first = list(apply_constant(apply_cap(fixed_waits(delays), 100), 3))
    added_first = list(apply_cap(apply_constant(fixed_waits(delays), 3), 100))

    assert all(value <= 100 for value in added_first)
    assert capped_first == [min(d, 100) + 3 for d in delays]
    if any(d >= 98 for d in delays):
        assert capped_first != added_first
