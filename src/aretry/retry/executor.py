r"""Retry executor with a fluent configuration API.

The executor stores a validated ``RetryConfig``. Each setter validates
its argument, swaps in a new configuration and returns the executor, so
calls can be chained. ``execute()`` then drives the configured action
through the retry loop on the caller's thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.backoff.factory import create_backoff_strategy
from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy
from aretry.utils.structured_logging import log_structured
from aretry.utils.validation import (
    validate_exponential_backoff,
    validate_linear_backoff_multiplier,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


def _noop() -> None:
    return None


class RetryExecutor(Generic[T]):
    """Invoke an action until it succeeds or the retry policy gives up.

    By default the action is invoked once, without delay. When every
    attempt fails and neither a breaking exception nor the final attempt
    rethrow applies, ``execute()`` returns ``None`` without raising.

    Args:
        config: Optional initial retry configuration.
        callbacks: Optional lifecycle callbacks.

    Example:
        ```pycon
        >>> from aretry import RetryExecutor
        >>> calls = []
        >>> def action() -> int:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("not yet")
        ...     return 42
        ...
        >>> RetryExecutor().set_action(action).set_max_attempts(5).execute()
        42
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        self._config = config if config is not None else RetryConfig()
        self._action: Callable[[], T | None] = _noop
        self.callbacks = CallbackManager(callbacks if callbacks is not None else CallbackConfig())

    @property
    def config(self) -> RetryConfig:
        """The current retry configuration."""
        return self._config

    @property
    def action(self) -> Callable[[], T | None]:
        """The action invoked on each attempt."""
        return self._action

    def set_action(self, action: Callable[[], T]) -> RetryExecutor[T]:
        """Set the action to execute.

        Args:
            action: A callable taking no argument.

        Returns:
            The executor itself.
        """
        self._action = action
        return self

    def set_max_attempts(self, max_attempts: int) -> RetryExecutor[T]:
        """Set the total number of attempts.

        Args:
            max_attempts: Number of times the action may be invoked.

        Returns:
            The executor itself.

        Raises:
            InvalidRetryTimesError: If ``max_attempts`` is not positive.
        """
        self._config = replace(self._config, max_attempts=max_attempts)
        return self

    def set_base_delay(self, base_delay: int) -> RetryExecutor[T]:
        """Set the base delay between attempts.

        Args:
            base_delay: The delay in microseconds.

        Returns:
            The executor itself.

        Raises:
            InvalidDelayError: If ``base_delay`` is negative.
        """
        self._config = replace(self._config, base_delay=base_delay)
        return self

    def set_breaking_exceptions(
        self, exceptions: Iterable[type[BaseException]]
    ) -> RetryExecutor[T]:
        """Replace the exception classes that stop the retry loop at once.

        Args:
            exceptions: Exception classes, matched by exact class.

        Returns:
            The executor itself.
        """
        self._config = replace(self._config, breaking_exceptions=frozenset(exceptions))
        return self

    def enable_exponential_backoff(self, enabled: bool = True) -> RetryExecutor[T]:
        """Enable or disable exponential backoff.

        Args:
            enabled: Pass ``False`` to disable exponential backoff.

        Returns:
            The executor itself.

        Raises:
            MutuallyExclusiveBackoffPolicyError: If enabling while a linear
                multiplier is set.
        """
        validate_exponential_backoff(enabled, self._config.linear_backoff_multiplier)
        self._config = replace(self._config, exponential_backoff=enabled)
        return self

    def set_linear_backoff_multiplier(self, multiplier: float) -> RetryExecutor[T]:
        """Set the linear backoff multiplier.

        Args:
            multiplier: Factor applied to the base delay. ``1.0`` disables
                linear backoff.

        Returns:
            The executor itself.

        Raises:
            MutuallyExclusiveBackoffPolicyError: If a multiplier other than
                ``1.0`` is set while exponential backoff is enabled.
        """
        validate_linear_backoff_multiplier(multiplier, self._config.exponential_backoff)
        self._config = replace(self._config, linear_backoff_multiplier=multiplier)
        return self

    def enable_rethrow_on_final_attempt(self) -> RetryExecutor[T]:
        """Raise the failure of the last attempt instead of returning ``None``.

        Returns:
            The executor itself.
        """
        self._config = replace(self._config, rethrow_on_final_attempt=True)
        return self

    def execute(self) -> T | None:
        """Execute the action with retry logic.

        Returns:
            The value returned by the first successful attempt, or
            ``None`` if all attempts failed without any failure being
            propagated.

        Raises:
            Exception: The original exception raised by the action, when it
                is a breaking exception or the final attempt failed with
                rethrow on final attempt enabled.
        """
        config = self._config
        decider = RetryDecider(
            config.max_attempts,
            config.breaking_exceptions,
            config.rethrow_on_final_attempt,
        )
        strategy = RetryStrategy(create_backoff_strategy(config))
        start_time = time.time()
        last_error: Exception | None = None

        for attempt in range(1, config.max_attempts + 1):
            try:
                result = self._action()
            except Exception as exc:
                last_error = exc
                should_propagate, reason = decider.should_propagate(exc, attempt)
                if should_propagate:
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Attempt {attempt}/{config.max_attempts} failed, raising ({reason})",
                        attempt=attempt,
                        max_attempts=config.max_attempts,
                        reason=reason,
                    )
                    self.callbacks.on_failure(
                        attempt, config.max_attempts, exc, reason, start_time
                    )
                    raise
                logger.debug(
                    f"Attempt {attempt}/{config.max_attempts} failed with {reason}: {exc}"
                )
                if attempt < config.max_attempts:
                    delay = strategy.calculate_delay(attempt)
                    self.callbacks.on_retry(attempt, config.max_attempts, delay, exc)
                    strategy.wait(delay)
            else:
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"Attempt {attempt}/{config.max_attempts} succeeded",
                    attempt=attempt,
                    max_attempts=config.max_attempts,
                )
                self.callbacks.on_success(attempt, config.max_attempts, result, start_time)
                return result

        # All attempts failed and every failure was suppressed
        log_structured(
            logger,
            logging.DEBUG,
            f"All {config.max_attempts} attempts failed, giving up without raising",
            attempt=config.max_attempts,
            max_attempts=config.max_attempts,
            reason="exhausted",
        )
        if last_error is not None:
            self.callbacks.on_failure(
                config.max_attempts, config.max_attempts, last_error, "exhausted", start_time
            )
        return None
