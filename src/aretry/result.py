r"""Success-or-failure values returned by retried operations.

An operation handed to :class:`aretry.Retry` reports its outcome by
returning :class:`Ok` or :class:`Err`. Raising an exception is reserved
for unexpected failures: the retry loop lets exceptions propagate
without retrying. Use :func:`catching` to turn selected exception types
into ``Err`` values.
"""

from __future__ import annotations

__all__ = ["Err", "Ok", "Result", "catching"]

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union

from aretry.exceptions import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome of one attempt.

    Attributes:
        value: The value produced by the operation.

    Example:
        ```pycon
        >>> from aretry.result import Ok
        >>> result = Ok(42)
        >>> result.is_ok()
        True
        >>> result.unwrap()
        42

        ```
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome of one attempt.

    The error can be any value; it is not required to be an exception.

    Attributes:
        error: The failure value produced by the operation.

    Example:
        ```pycon
        >>> from aretry.result import Err
        >>> result = Err("timeout")
        >>> result.is_err()
        True
        >>> result.unwrap_or("fallback")
        'fallback'

        ```
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the held error.

        Raises:
            BaseException: The error itself, if it is an exception.
            UnwrapError: If the error is any other value.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def catching(
    func: Callable[..., T], *exception_types: type[BaseException]
) -> Callable[..., Result[T, BaseException]]:
    """Wrap a raising callable into a result-returning one.

    The returned callable forwards its arguments to ``func``. A normal
    return becomes ``Ok(value)``; an exception of one of
    ``exception_types`` becomes ``Err(exc)``; any other exception
    propagates unchanged. Without ``exception_types``, ``Exception`` is
    caught.

    Args:
        func: The callable to wrap.
        *exception_types: The exception types that count as a failure.

    Returns:
        The wrapped callable.

    Example:
        ```pycon
        >>> from aretry.result import catching
        >>> def parse(text: str) -> int:
        ...     return int(text)
        ...
        >>> safe_parse = catching(parse, ValueError)
        >>> safe_parse("12")
        Ok(value=12)
        >>> safe_parse("twelve").is_err()
        True

        ```
    """
    caught = exception_types or (Exception,)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T, BaseException]:
        try:
            return Ok(func(*args, **kwargs))
        except caught as exc:
            return Err(exc)

    return wrapper
