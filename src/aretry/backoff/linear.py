r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy


class LinearBackoff(BaseBackoffStrategy):
    """Base delay scaled by a constant multiplier.

    Calculates delay as: floor(base_delay * multiplier). The delay does
    not depend on the attempt number, so every retry waits the same
    scaled amount. A non-finite product (infinite or NaN multiplier)
    gives a delay of 0, so no sleep is performed.

    Args:
        base_delay: The base delay in microseconds.
        multiplier: The factor applied to ``base_delay``.

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=100, multiplier=2.5)
        >>> backoff.calculate(1)
        250
        >>> backoff.calculate(3)
        250
        >>> LinearBackoff(base_delay=3, multiplier=1.5).calculate(1)
        4

        ```
    """

    def __init__(self, base_delay: int = 0, multiplier: float = 1.0) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.multiplier = multiplier

    def calculate(self, attempt: int) -> int:  # noqa: ARG002
        delay = self.base_delay * self.multiplier
        if not math.isfinite(delay):
            return 0
        return math.floor(delay)
