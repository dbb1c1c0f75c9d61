r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay << attempt, i.e.
    base_delay * (2 ** attempt). Attempts are 1-indexed, so the first
    retry already waits twice the base delay.

    Args:
        base_delay: The base delay in microseconds.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=100)
        >>> backoff.calculate(1)
        200
        >>> backoff.calculate(2)
        400
        >>> backoff.calculate(3)
        800

        ```
    """

    def __init__(self, base_delay: int = 0) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay

    def calculate(self, attempt: int) -> int:
        """Calculate exponential backoff delay.

        Args:
            attempt: The attempt that just failed (1-indexed).

        Returns:
            The delay in microseconds: ``base_delay << attempt``.
        """
        return self.base_delay << attempt
