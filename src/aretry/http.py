r"""Adapter turning ``httpx`` requests into retryable operations.

The retry engine only understands ``Ok`` and ``Err``. This module maps
HTTP outcomes onto them: transient failures (transport errors and
retryable status codes) become ``Err`` so that they are retried, every
other response becomes ``Ok`` and is handed back to the caller.
"""

from __future__ import annotations

__all__ = ["http_operation", "response_result"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import RETRY_STATUS_CODES
from aretry.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.result import Result

logger: logging.Logger = logging.getLogger(__name__)


def response_result(
    response: httpx.Response, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> Result[httpx.Response, httpx.Response]:
    """Classify an HTTP response.

    Args:
        response: The response to classify.
        status_forcelist: Status codes that should trigger a retry.

    Returns:
        ``Err(response)`` if the status code is in ``status_forcelist``,
        ``Ok(response)`` otherwise. Non-retryable error statuses (e.g.
        404) are ``Ok``: retrying them would not help, and the caller
        inspects the status code.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import response_result
        >>> response_result(httpx.Response(503)).is_err()
        True
        >>> response_result(httpx.Response(404)).is_ok()
        True

        ```
    """
    if response.status_code in status_forcelist:
        return Err(response)
    return Ok(response)


def http_operation(
    request_func: Callable[..., httpx.Response],
    url: str,
    *,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    **kwargs: Any,
) -> Callable[[], Result[httpx.Response, httpx.Response | httpx.TransportError]]:
    """Build a zero-argument operation performing one HTTP request.

    Args:
        request_func: The request function, e.g. ``client.get`` or
            ``httpx.post``. It is called as ``request_func(url,
            **kwargs)``.
        url: The URL to request.
        status_forcelist: Status codes that should trigger a retry.
        **kwargs: Additional keyword arguments passed to
            ``request_func``.

    Returns:
        An operation suitable for :meth:`aretry.Retry.call`. Transport
        errors (timeouts, connection failures, ...) are returned as
        ``Err(exc)``; other exceptions propagate.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry import Retry
        >>> from aretry.http import http_operation
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     result = Retry.exponential().call(
        ...         http_operation(client.get, "https://api.example.com/data")
        ...     )
        ...

        ```
    """

    def operation() -> Result[httpx.Response, httpx.Response | httpx.TransportError]:
        try:
            response = request_func(url, **kwargs)
        except httpx.TransportError as exc:
            logger.debug(f"Request to {url} failed: {type(exc).__name__}: {exc}")
            return Err(exc)
        return response_result(response, status_forcelist)

    return operation
