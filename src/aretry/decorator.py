r"""Decorator running a function through a retry executor."""

from __future__ import annotations

__all__ = ["retry"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_LINEAR_BACKOFF_MULTIPLIER,
    DEFAULT_MAX_ATTEMPTS,
)
from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def retry(
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay: int = DEFAULT_BASE_DELAY,
    breaking_exceptions: Iterable[type[BaseException]] = (),
    exponential_backoff: bool = False,
    linear_backoff_multiplier: float = DEFAULT_LINEAR_BACKOFF_MULTIPLIER,
    rethrow_on_final_attempt: bool = False,
    callbacks: CallbackConfig | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T | None]]:
    """Retry every call of the decorated function.

    The configuration is validated once, when the decorator is applied.
    Each call runs its own ``RetryExecutor``, so the wrapped function
    returns ``None`` when all attempts fail silently, exactly like
    ``RetryExecutor.execute``.

    Args:
        max_attempts: Total number of invocations. Must be > 0.
        base_delay: Base delay in microseconds. Must be >= 0.
        breaking_exceptions: Exception classes propagated immediately.
        exponential_backoff: Whether to use exponential backoff.
        linear_backoff_multiplier: Linear backoff multiplier.
        rethrow_on_final_attempt: Whether to raise the last failure.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The decorator.

    Raises:
        RetryConfigError: If the configuration is invalid.

    Example:
        ```pycon
        >>> from aretry import retry
        >>> attempts = []
        >>> @retry(max_attempts=3, rethrow_on_final_attempt=True)
        ... def fetch(key: str) -> str:
        ...     attempts.append(key)
        ...     if len(attempts) < 2:
        ...         raise TimeoutError(key)
        ...     return key.upper()
        ...
        >>> fetch("abc")
        'ABC'
        >>> attempts
        ['abc', 'abc']

        ```
    """
    config = RetryConfig(
        max_attempts=max_attempts,
        base_delay=base_delay,
        breaking_exceptions=frozenset(breaking_exceptions),
        exponential_backoff=exponential_backoff,
        linear_backoff_multiplier=linear_backoff_multiplier,
        rethrow_on_final_attempt=rethrow_on_final_attempt,
    )

    def decorator(func: Callable[..., T]) -> Callable[..., T | None]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T | None:
            executor: RetryExecutor[T] = RetryExecutor(config=config, callbacks=callbacks)
            return executor.set_action(functools.partial(func, *args, **kwargs)).execute()

        return wrapper

    return decorator
