r"""Helpers shared by the retry executor: validation, sleeping and
structured logging."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
    "sleep_microseconds",
    "validate_base_delay",
    "validate_exponential_backoff",
    "validate_linear_backoff_multiplier",
    "validate_max_attempts",
]

from aretry.utils.sleep import sleep_microseconds
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from aretry.utils.validation import (
    validate_base_delay,
    validate_exponential_backoff,
    validate_linear_backoff_multiplier,
    validate_max_attempts,
)
