r"""Parameter validation utilities for the retry configuration.

Each function raises a ``RetryConfigError`` subclass when its value is
rejected and returns ``None`` otherwise. The validators never mutate
anything, so a caller can run them before committing a new value.
"""

from __future__ import annotations

__all__ = [
    "validate_base_delay",
    "validate_exponential_backoff",
    "validate_linear_backoff_multiplier",
    "validate_max_attempts",
]

from aretry.config import DEFAULT_LINEAR_BACKOFF_MULTIPLIER
from aretry.exceptions import (
    InvalidDelayError,
    InvalidRetryTimesError,
    MutuallyExclusiveBackoffPolicyError,
)


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the total number of attempts.

    Args:
        max_attempts: The number of times the action may be invoked.
            Must be an integer > 0.

    Raises:
        InvalidRetryTimesError: If ``max_attempts`` is not an integer, or
            is 0 or negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        Traceback (most recent call last):
        ...
        aretry.exceptions.InvalidRetryTimesError: Tried to set 0 retry times

        ```
    """
    if not isinstance(max_attempts, int) or max_attempts <= 0:
        msg = f"Tried to set {max_attempts} retry times"
        raise InvalidRetryTimesError(msg)


def validate_base_delay(base_delay: int) -> None:
    """Validate the base delay between attempts.

    Args:
        base_delay: The delay in microseconds. Must be an integer >= 0.

    Raises:
        InvalidDelayError: If ``base_delay`` is not an integer, or is
            negative.
    """
    if not isinstance(base_delay, int) or base_delay < 0:
        msg = f"Tried to set {base_delay} as delay"
        raise InvalidDelayError(msg)


def validate_exponential_backoff(enabled: bool, linear_backoff_multiplier: float) -> None:
    """Check that exponential backoff can be enabled.

    Args:
        enabled: Whether exponential backoff is requested.
        linear_backoff_multiplier: The linear multiplier currently in use.

    Raises:
        MutuallyExclusiveBackoffPolicyError: If exponential backoff is
            requested while linear backoff is active.
    """
    if enabled and linear_backoff_multiplier != DEFAULT_LINEAR_BACKOFF_MULTIPLIER:
        msg = "Tried to use exponential backoff policy with linear multiplier != 1"
        raise MutuallyExclusiveBackoffPolicyError(msg)


def validate_linear_backoff_multiplier(multiplier: float, exponential_backoff: bool) -> None:
    """Check that a linear multiplier can be used.

    Setting the multiplier back to its default value is always allowed.

    Args:
        multiplier: The requested linear multiplier.
        exponential_backoff: Whether exponential backoff is currently enabled.

    Raises:
        MutuallyExclusiveBackoffPolicyError: If a non-default multiplier is
            requested while exponential backoff is enabled.
    """
    if exponential_backoff and multiplier != DEFAULT_LINEAR_BACKOFF_MULTIPLIER:
        msg = "Tried to use linear backoff with exponential enabled"
        raise MutuallyExclusiveBackoffPolicyError(msg)
