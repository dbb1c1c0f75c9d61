r"""Blocking sleep helper working in microseconds."""

from __future__ import annotations

__all__ = ["sleep_microseconds"]

import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def sleep_microseconds(delay: int) -> None:
    """Block the calling thread for ``delay`` microseconds.

    A zero or negative delay returns immediately without sleeping.

    Args:
        delay: The number of microseconds to wait.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import sleep_microseconds
        >>> sleep_microseconds(0)
        >>> sleep_microseconds(10)

        ```
    """
    if delay <= 0:
        return
    logger.debug(f"Waiting {delay}us before retry")
    time.sleep(delay / 1_000_000)
