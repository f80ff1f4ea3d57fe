r"""Structured (JSON) logging support for the retry loop.

The retry engine logs every failed attempt, give-up and late success
through :func:`log_structured`, attaching fields such as ``attempt``,
``wait_time`` and ``elapsed``. With the standard formatters these
fields are simply ignored. Installing :class:`StructuredFormatter` on a
handler turns each record into one JSON object per line, which log
aggregation systems can index directly.

A correlation id can be bound to the current context so that all
records produced while retrying one logical operation can be grouped.

Example:
    ```python
    import logging

    from aretry import Retry
    from aretry.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    set_correlation_id("job-42")
    Retry.exponential().call(operation)
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

# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Return the correlation id bound to the current context.

    Returns:
        The correlation id, or ``None`` if none is bound.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'
        >>> clear_correlation_id()
        >>> get_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Bind a correlation id to the current context.

    The id lives in a context variable, so each thread (and each
    ``contextvars`` context) sees its own value.

    Args:
        correlation_id: The id to attach to subsequent records.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Remove the correlation id from the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Every object contains ``timestamp`` (ISO 8601, UTC, millisecond
    precision), ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``. ``correlation_id`` is added when one is
    bound, ``exception`` when the record carries exception info, and
    every field passed through ``extra`` is copied as is. Values that
    are not JSON serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aretry", logging.INFO, __file__, 1, "done", None, None)
        >>> record.attempt = 2
        >>> payload = json.loads(StructuredFormatter().format(record))
        >>> payload["message"], payload["attempt"]
        ('done', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
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
            payload["correlation_id"] = correlation_id
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        )
        return json.dumps(payload, default=repr)

    def formatTime(
        self, record: logging.LogRecord, datefmt: str | None = None
    ) -> str:
        """Return the record creation time as an ISO 8601 UTC string.

        ``datefmt`` is ignored so that the output stays machine readable.
        """
        seconds = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{seconds}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log ``message`` with additional structured fields.

    This is a thin wrapper around ``logger.log(..., extra=fields)``. The
    level check happens first so that no record is built when the level
    is disabled.

    Args:
        logger: The logger to emit on.
        level: The logging level, e.g. ``logging.DEBUG``.
        message: The human readable message.
        **fields: Structured fields to attach to the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=fields, stacklevel=2)
