r"""Unit tests for the retry decorator."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest

from aretry import retry
from aretry.exceptions import InvalidRetryTimesError, MutuallyExclusiveBackoffPolicyError
from aretry.retry import CallbackConfig


def test_retry_decorator_returns_result() -> None:
    @retry(max_attempts=3)
    def add(a: int, b: int = 0) -> int:
        return a + b

    assert add(1, b=2) == 3


def test_retry_decorator_preserves_metadata() -> None:
    @retry()
    def documented() -> None:
        """Some documentation."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Some documentation."


def test_retry_decorator_retries_with_arguments(mock_sleep: Mock) -> None:
    func = Mock(side_effect=[OSError("a"), OSError("b"), "ok"])
    wrapped = retry(max_attempts=3, base_delay=1000)(func)

    assert wrapped("x", key=1) == "ok"
    assert func.call_args_list == [call("x", key=1)] * 3
    assert mock_sleep.call_args_list == [call(0.001), call(0.001)]


def test_retry_decorator_exhausted_returns_none(mock_sleep: Mock) -> None:
    func = Mock(side_effect=OSError("a"))
    assert retry(max_attempts=2)(func)() is None
    assert func.call_count == 2


def test_retry_decorator_rethrow_on_final_attempt() -> None:
    func = Mock(side_effect=OSError("down"))
    with pytest.raises(OSError, match=r"down"):
        retry(max_attempts=2, rethrow_on_final_attempt=True)(func)()
    assert func.call_count == 2


def test_retry_decorator_breaking_exceptions() -> None:
    func = Mock(side_effect=PermissionError("denied"))
    with pytest.raises(PermissionError, match=r"denied"):
        retry(max_attempts=5, breaking_exceptions=[PermissionError])(func)()
    func.assert_called_once_with()


def test_retry_decorator_each_call_starts_from_first_attempt() -> None:
    func = Mock(side_effect=[OSError("a"), 1, OSError("b"), 2])
    wrapped = retry(max_attempts=2)(func)
    assert wrapped() == 1
    assert wrapped() == 2


def test_retry_decorator_callbacks(mock_callback: Mock) -> None:
    func = Mock(side_effect=[OSError("a"), "ok"])
    retry(max_attempts=2, callbacks=CallbackConfig(on_retry=mock_callback))(func)()
    mock_callback.assert_called_once()


def test_retry_decorator_validates_eagerly() -> None:
    with pytest.raises(InvalidRetryTimesError, match=r"Tried to set 0 retry times"):
        retry(max_attempts=0)


def test_retry_decorator_mutually_exclusive_backoff() -> None:
    with pytest.raises(MutuallyExclusiveBackoffPolicyError):
        retry(exponential_backoff=True, linear_backoff_multiplier=2.0)
