r"""Exceptions raised by the retry library.

The retry engine never wraps or classifies the failures produced by an
operation: those are returned to the caller as ``Err`` values. The
exceptions below only signal misuse of the library itself.
"""

from __future__ import annotations

__all__ = ["InvalidResultError", "RetryError", "UnwrapError"]

from typing import Any


class RetryError(Exception):
    """Base class for errors raised by ``aretry``."""


class UnwrapError(RetryError):
    """Raised when unwrapping an ``Err`` whose error is not an exception.

    Args:
        error: The error value held by the ``Err``.

    Attributes:
        error: The error value held by the ``Err``.

    Example:
        ```pycon
        >>> from aretry.exceptions import UnwrapError
        >>> exc = UnwrapError("not found")
        >>> exc.error
        'not found'
        >>> str(exc)
        "called unwrap() on Err('not found')"

        ```
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"called unwrap() on Err({error!r})")
        self.error = error


class InvalidResultError(RetryError, TypeError):
    """Raised when an operation returns something other than ``Ok`` or
    ``Err``.

    Args:
        value: The value returned by the operation.

    Attributes:
        value: The value returned by the operation.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"operation must return Ok(...) or Err(...), got {type(value).__name__}: {value!r}"
        )
        self.value = value
