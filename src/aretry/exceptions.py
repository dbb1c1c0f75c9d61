r"""Exceptions raised when configuring a retry executor.

Failures raised by the retried action are never wrapped in these
classes. They are re-raised unchanged when the retry policy decides to
propagate them.
"""

from __future__ import annotations

__all__ = [
    "InvalidDelayError",
    "InvalidRetryTimesError",
    "MutuallyExclusiveBackoffPolicyError",
    "RetryConfigError",
]


class RetryConfigError(ValueError):
    """Base class for invalid retry configuration values.

    Example:
        ```pycon
        >>> from aretry.exceptions import InvalidDelayError, RetryConfigError
        >>> issubclass(InvalidDelayError, RetryConfigError)
        True

        ```
    """


class InvalidRetryTimesError(RetryConfigError):
    """Raised when the number of attempts is not strictly positive."""


class InvalidDelayError(RetryConfigError):
    """Raised when the base delay is negative."""


class MutuallyExclusiveBackoffPolicyError(RetryConfigError):
    """Raised when exponential and linear backoff are both requested."""
