r"""Selection of the backoff strategy matching a retry configuration."""

from __future__ import annotations

__all__ = ["create_backoff_strategy"]

from typing import TYPE_CHECKING

from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.linear import LinearBackoff
from aretry.config import DEFAULT_LINEAR_BACKOFF_MULTIPLIER

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.retry.config import RetryConfig


def create_backoff_strategy(config: RetryConfig) -> BaseBackoffStrategy:
    """Return the backoff strategy described by ``config``.

    Exponential backoff takes precedence, then linear backoff when the
    multiplier differs from its default, and a constant delay otherwise.

    Args:
        config: The retry configuration.

    Returns:
        The backoff strategy instance.

    Example:
        ```pycon
        >>> from aretry.backoff import create_backoff_strategy
        >>> from aretry.retry import RetryConfig
        >>> strategy = create_backoff_strategy(RetryConfig(base_delay=10))
        >>> type(strategy).__name__
        'ConstantBackoff'
        >>> strategy = create_backoff_strategy(RetryConfig(base_delay=10, exponential_backoff=True))
        >>> strategy.calculate(2)
        40

        ```
    """
    if config.exponential_backoff:
        return ExponentialBackoff(base_delay=config.base_delay)
    if config.linear_backoff_multiplier != DEFAULT_LINEAR_BACKOFF_MULTIPLIER:
        return LinearBackoff(
            base_delay=config.base_delay, multiplier=config.linear_backoff_multiplier
        )
    return ConstantBackoff(delay=config.base_delay)
