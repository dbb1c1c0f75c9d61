r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before invoking the
    action again, based on the index of the attempt that just failed.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> int:
        """Calculate the delay to apply after a failed attempt.

        Args:
            attempt: The attempt that just failed (1-indexed). For example,
                attempt=1 is the delay between the first and second attempts.

        Returns:
            The delay in microseconds before the next attempt.
        """
