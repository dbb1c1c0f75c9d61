r"""Default configuration values for the retry executor.

Delays are expressed in microseconds.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_LINEAR_BACKOFF_MULTIPLIER",
    "DEFAULT_MAX_ATTEMPTS",
]

# Total number of invocations of the action, the first one included.
# 1 means the action runs once and is never retried.
DEFAULT_MAX_ATTEMPTS = 1

# Base delay between two attempts, in microseconds
DEFAULT_BASE_DELAY = 0

# Any other value enables linear backoff
DEFAULT_LINEAR_BACKOFF_MULTIPLIER = 1.0
