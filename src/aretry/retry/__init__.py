r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Configuration for retry behavior
    - CallbackConfig: Configuration for callbacks
    - RetryStrategy: Strategy for calculating retry delays
    - RetryDecider: Logic for deciding whether to propagate a failure
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Fluent retry executor
"""

from __future__ import annotations

__all__ = [
    "CallbackConfig",
    "CallbackManager",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
]

from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy
