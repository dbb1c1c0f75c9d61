r"""Delay calculation between two attempts."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from typing import TYPE_CHECKING

from aretry.utils.sleep import sleep_microseconds

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy


class RetryStrategy:
    """Strategy for calculating and applying retry delays.

    Args:
        backoff_strategy: The backoff strategy computing each delay.
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy) -> None:
        self.backoff_strategy = backoff_strategy

    def calculate_delay(self, attempt: int) -> int:
        """Calculate delay before next attempt.

        Args:
            attempt: The attempt that just failed (1-indexed).

        Returns:
            Delay in microseconds.
        """
        return self.backoff_strategy.calculate(attempt)

    def wait(self, delay: int) -> None:
        """Block for ``delay`` microseconds; non-positive delays are skipped."""
        sleep_microseconds(delay)
