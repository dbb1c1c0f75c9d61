r"""Opt-in structured (JSON) logging for retry executions.

The executor reports the outcome of every ``execute()`` call through
``log_structured``, attaching the attempt counters as extra fields.
Those fields are only visible as JSON keys when the ``aretry`` logger
is given a handler using ``StructuredFormatter``. The library never
installs handlers on its own.

Example:
    ```python
    import logging

    from aretry.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    set_correlation_id("job-42")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes present on every LogRecord, used to tell user extras apart
_RESERVED_ATTRIBUTES: frozenset[str] = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Return the correlation ID of the current context, if any.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_correlation_id, set_correlation_id
        >>> set_correlation_id("req-1")
        >>> get_correlation_id()
        'req-1'

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Attach a correlation ID to the log records of the current context.

    Args:
        correlation_id: An identifier shared by related log entries.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Remove the correlation ID of the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The output always contains ``timestamp``, ``level``, ``logger``,
    ``message``, ``module``, ``function`` and ``line``. The correlation
    ID, exception text and any ``extra`` fields are added when present.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aretry", logging.INFO, "x.py", 1, "done", (), None)
        >>> record.attempt = 2
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["attempt"]
        ('done', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Return the record creation time as an ISO 8601 UTC string."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log ``message`` with ``extra`` as structured fields.

    Args:
        logger: The logger to use.
        level: The log level, e.g. ``logging.DEBUG``.
        message: The log message.
        **extra: Fields attached to the log record.
    """
    logger.log(level, message, extra=extra)
