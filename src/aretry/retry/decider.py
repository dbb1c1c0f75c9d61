r"""Failure classification for the retry loop.

This module provides the RetryDecider class that decides whether a
failure raised by the action is propagated to the caller right away or
suppressed so that the next attempt can run.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class RetryDecider:
    """Decides whether a failure should be propagated.

    Args:
        max_attempts: Maximum number of attempts.
        breaking_exceptions: Exception classes that are always propagated.
        rethrow_on_final_attempt: Whether the failure of the last attempt
            is propagated.

    Example:
        ```pycon
        >>> from aretry.retry import RetryDecider
        >>> decider = RetryDecider(max_attempts=3, breaking_exceptions=[KeyError])
        >>> decider.should_propagate(KeyError("k"), attempt=1)
        (True, 'breaking exception')
        >>> decider.should_propagate(ValueError("v"), attempt=1)
        (False, 'ValueError')

        ```
    """

    def __init__(
        self,
        max_attempts: int,
        breaking_exceptions: Iterable[type[BaseException]] = (),
        rethrow_on_final_attempt: bool = False,
    ) -> None:
        self.max_attempts = max_attempts
        self.breaking_exceptions = frozenset(breaking_exceptions)
        self.rethrow_on_final_attempt = rethrow_on_final_attempt

    def is_breaking(self, error: BaseException) -> bool:
        """Return whether the exact class of ``error`` is a breaking one.

        Subclasses of a breaking exception class are not breaking.
        """
        return type(error) in self.breaking_exceptions

    def is_final_attempt_rethrow(self, attempt: int) -> bool:
        """Return whether a failure at ``attempt`` must be re-raised because
        it is the last one and rethrow on final attempt is enabled."""
        return self.rethrow_on_final_attempt and attempt >= self.max_attempts

    def should_propagate(self, error: BaseException, attempt: int) -> tuple[bool, str]:
        """Determine if a failure should stop the retry loop.

        Args:
            error: The exception raised by the action.
            attempt: Current attempt number (1-indexed).

        Returns:
            Tuple of (should_propagate, reason).
        """
        if self.is_final_attempt_rethrow(attempt):
            return (True, "final attempt")
        if self.is_breaking(error):
            return (True, "breaking exception")
        return (False, type(error).__name__)
