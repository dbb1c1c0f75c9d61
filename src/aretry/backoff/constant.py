r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Fixed delay between attempts.

    This is the strategy used when neither exponential nor linear
    backoff is configured.

    Args:
        delay: The delay in microseconds applied after every failed attempt.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=250)
        >>> backoff.calculate(1)
        250
        >>> backoff.calculate(7)
        250

        ```
    """

    def __init__(self, delay: int = 0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def calculate(self, attempt: int) -> int:  # noqa: ARG002
        return self.delay
