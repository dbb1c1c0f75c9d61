r"""aretry - Configurable retry executor for fallible operations.

This package re-invokes an arbitrary callable up to a bounded number of
times, waiting between attempts according to a fixed, linear, or
exponential backoff policy. Failures are either suppressed until the
attempts run out, or propagated immediately when their exact class is
configured as breaking.

Key Features:
    - Fluent configuration API with eager validation
    - Fixed, linear, and exponential backoff (microsecond delays)
    - Breaking exceptions matched by exact class
    - Optional rethrow of the failure raised by the last attempt
    - Callbacks for observability (retry, success, failure)
    - ``retry`` decorator for plain functions

Example:
    ```pycon
    >>> from aretry import RetryExecutor
    >>> executor = (
    ...     RetryExecutor()
    ...     .set_action(lambda: "done")
    ...     .set_max_attempts(3)
    ...     .set_base_delay(1_000)
    ...     .enable_exponential_backoff()
    ... )
    >>> executor.execute()
    'done'

    ```
"""

from __future__ import annotations

__all__ = [
    "CallbackConfig",
    "InvalidDelayError",
    "InvalidRetryTimesError",
    "MutuallyExclusiveBackoffPolicyError",
    "RetryConfig",
    "RetryConfigError",
    "RetryExecutor",
    "__version__",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.decorator import retry
from aretry.exceptions import (
    InvalidDelayError,
    InvalidRetryTimesError,
    MutuallyExclusiveBackoffPolicyError,
    RetryConfigError,
)
from aretry.retry import CallbackConfig, RetryConfig, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
