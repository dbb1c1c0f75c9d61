r"""Callback management for the retry executor."""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING, Any

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo

if TYPE_CHECKING:
    from aretry.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations.

    Args:
        callbacks: Callback configuration.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_retry(self, attempt: int, max_attempts: int, delay: int, error: Exception) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: The attempt that just failed (1-indexed).
            max_attempts: Maximum number of attempts.
            delay: Delay in microseconds before the next attempt.
            error: The suppressed exception.
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(attempt=attempt, max_attempts=max_attempts, delay=delay, error=error)
            )

    def on_success(self, attempt: int, max_attempts: int, result: Any, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            attempt: The attempt that succeeded (1-indexed).
            max_attempts: Maximum number of attempts.
            result: The value returned by the action.
            start_time: Timestamp when ``execute()`` started.
        """
        if self.callbacks.on_success:
            self.callbacks.on_success(
                SuccessInfo(
                    attempt=attempt,
                    max_attempts=max_attempts,
                    result=result,
                    total_time=time.time() - start_time,
                )
            )

    def on_failure(
        self,
        attempt: int,
        max_attempts: int,
        error: Exception,
        reason: str,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            attempt: The last attempt made (1-indexed).
            max_attempts: Maximum number of attempts.
            error: The last exception raised by the action.
            reason: Why the retry loop stopped.
            start_time: Timestamp when ``execute()`` started.
        """
        if self.callbacks.on_failure:
            self.callbacks.on_failure(
                FailureInfo(
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=error,
                    reason=reason,
                    total_time=time.time() - start_time,
                )
            )
