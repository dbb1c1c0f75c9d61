r"""Configuration dataclasses for retry behavior.

This module provides configuration objects for the retry policy and
the lifecycle callbacks.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "RetryConfig"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aretry.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_LINEAR_BACKOFF_MULTIPLIER,
    DEFAULT_MAX_ATTEMPTS,
)
from aretry.utils.validation import (
    validate_base_delay,
    validate_exponential_backoff,
    validate_max_attempts,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Every instance is validated on creation and is immutable, so a
    ``RetryConfig`` never holds an invalid attempt count, a negative
    delay, or two backoff policies at once. Use ``dataclasses.replace``
    to derive a modified configuration.

    Attributes:
        max_attempts: Total number of invocations of the action. Must be > 0.
        base_delay: Base delay between attempts in microseconds. Must be >= 0.
        breaking_exceptions: Exception classes that are propagated
            immediately. Matching is by exact class, subclasses do not match.
        exponential_backoff: Whether the delay grows as
            ``base_delay << attempt``.
        linear_backoff_multiplier: Multiplier applied to the base delay.
            ``1.0`` disables linear backoff.
        rethrow_on_final_attempt: Whether the failure of the last attempt
            is raised instead of being swallowed.

    Raises:
        InvalidRetryTimesError: If ``max_attempts`` is not a positive integer.
        InvalidDelayError: If ``base_delay`` is not a non-negative integer.
        MutuallyExclusiveBackoffPolicyError: If exponential and linear
            backoff are both enabled.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig
        >>> config = RetryConfig(max_attempts=3, breaking_exceptions=[KeyError])
        >>> config.max_attempts
        3
        >>> config.breaking_exceptions
        frozenset({<class 'KeyError'>})

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: int = DEFAULT_BASE_DELAY
    breaking_exceptions: frozenset[type[BaseException]] = field(default_factory=frozenset)
    exponential_backoff: bool = False
    linear_backoff_multiplier: float = DEFAULT_LINEAR_BACKOFF_MULTIPLIER
    rethrow_on_final_attempt: bool = False

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        validate_base_delay(self.base_delay)
        validate_exponential_backoff(self.exponential_backoff, self.linear_backoff_multiplier)
        object.__setattr__(self, "breaking_exceptions", frozenset(self.breaking_exceptions))


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_retry: Optional callback invoked before the delay preceding a retry.
        on_success: Optional callback invoked when the action succeeds.
        on_failure: Optional callback invoked when a failure is propagated
            or all attempts are exhausted.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
