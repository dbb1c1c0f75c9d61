r"""Callback types and data structures for observability.

The retry executor exposes three lifecycle hooks:
- on_retry: Called after a suppressed failure, before the delay that
  precedes the next attempt
- on_success: Called when the action returns a result
- on_failure: Called when a failure is propagated, or when all attempts
  failed and the executor gives up silently

Hooks run on the caller's thread. An exception raised by a hook is not
caught and reaches the caller of ``execute()``.

Example:
    ```pycon
    >>> from aretry import RetryExecutor
    >>> from aretry.callbacks import RetryInfo
    >>> from aretry.retry import CallbackConfig
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"attempt {info.attempt}/{info.max_attempts} failed: {info.error!r}")
    ...
    >>> def flaky() -> str:
    ...     raise RuntimeError("boom")
    ...
    >>> executor = RetryExecutor(callbacks=CallbackConfig(on_retry=log_retry))
    >>> executor.set_action(flaky).set_max_attempts(2).execute()
    attempt 1/2 failed: RuntimeError('boom')

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RetryInfo", "SuccessInfo"]

from dataclasses import dataclass
from typing import Any


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The attempt that just failed (1-indexed).
        max_attempts: Maximum number of attempts configured.
        delay: The delay in microseconds applied before the next attempt.
        error: The suppressed exception.
    """

    attempt: int
    max_attempts: int
    delay: int
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        max_attempts: Maximum number of attempts configured.
        result: The value returned by the action.
        total_time: Time spent in ``execute()``, delays included (seconds).
    """

    attempt: int
    max_attempts: int
    result: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The last attempt made (1-indexed).
        max_attempts: Maximum number of attempts configured.
        error: The last exception raised by the action.
        reason: ``"breaking exception"`` or ``"final attempt"`` when the
            error is propagated, ``"exhausted"`` when it is swallowed.
        total_time: Time spent in ``execute()``, delays included (seconds).
    """

    attempt: int
    max_attempts: int
    error: Exception
    reason: str
    total_time: float
