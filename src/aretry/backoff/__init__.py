r"""Backoff strategies computing the delay between two attempts.

Three policies are available: a constant delay, a linearly scaled
delay, and an exponentially growing delay. All delays are integers
expressed in microseconds.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "create_backoff_strategy",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.factory import create_backoff_strategy
from aretry.backoff.linear import LinearBackoff
