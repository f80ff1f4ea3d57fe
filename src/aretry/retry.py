r"""Retry engine running a fallible operation until it succeeds or gives up.

This module provides the :class:`Retry` engine, which composes one stop
strategy, one wait strategy and one jitter strategy, and the
:class:`RetryInfo` record describing one execution.
"""

from __future__ import annotations

__all__ = ["Retry", "RetryInfo"]

import functools
import logging
import time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_MULTIPLIER, DEFAULT_WAIT
from aretry.exceptions import InvalidResultError
from aretry.jitter import BaseJitterStrategy, FullJitter, NoJitter
from aretry.result import Err, Ok
from aretry.stop import BaseStopStrategy, StopAfterAttempts
from aretry.utils.structured_logging import log_structured
from aretry.wait import BaseWaitStrategy, WaitExponential, WaitFixed

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.result import Result

T = TypeVar("T")
E = TypeVar("E")

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryInfo:
    """Summary of one retry execution.

    Attributes:
        attempts: The index of the attempt that ended the loop
            (0-indexed). This is also the number of failed attempts that
            were retried: 0 when the first call succeeded or when the
            stop strategy gave up right after it.
        elapsed: Seconds elapsed between the start of the first attempt
            and the end of the loop.
    """

    attempts: int
    elapsed: float


@dataclass(frozen=True)
class Retry:
    """Run an operation repeatedly until it succeeds or a stop condition
    fires.

    The engine is immutable. :meth:`with_stop`, :meth:`with_wait` and
    :meth:`with_jitter` return a new engine with one strategy replaced,
    so a configured engine can be used as a template and shared between
    threads. Each call keeps its loop state locally.

    The operation is a zero-argument callable returning
    :class:`~aretry.result.Ok` or :class:`~aretry.result.Err`. Exceptions
    raised by the operation are not retried: they propagate to the
    caller immediately.

    Args:
        stop_strategy: When to give up (default: stop after 3 attempts).
        wait_strategy: How long to wait after a failure (default: 1
            second).
        jitter_strategy: How to randomize the wait (default: no
            jitter).

    Example:
        ```pycon
        >>> from aretry import Err, Ok, Retry
        >>> from aretry.stop import StopAfterAttempts, StopAfterDelay
        >>> from aretry.wait import WaitFixed
        >>> outcomes = iter([Err("busy"), Err("busy"), Ok("done")])
        >>> retry = (
        ...     Retry.exponential()
        ...     .with_stop(StopAfterAttempts(5) | StopAfterDelay(30.0))
        ...     .with_wait(WaitFixed(0.01))
        ... )
        >>> result, info = retry.call_with_info(lambda: next(outcomes))
        >>> result
        Ok(value='done')
        >>> info.attempts
        2

        ```
    """

    stop_strategy: BaseStopStrategy = field(
        default_factory=lambda: StopAfterAttempts(DEFAULT_MAX_ATTEMPTS)
    )
    wait_strategy: BaseWaitStrategy = field(default_factory=lambda: WaitFixed(DEFAULT_WAIT))
    jitter_strategy: BaseJitterStrategy = field(default_factory=NoJitter)

    @classmethod
    def basic(cls) -> Retry:
        """Fixed 1 second wait, stop after 3 attempts, no jitter."""
        return cls(
            stop_strategy=StopAfterAttempts(DEFAULT_MAX_ATTEMPTS),
            wait_strategy=WaitFixed(DEFAULT_WAIT),
            jitter_strategy=NoJitter(),
        )

    @classmethod
    def exponential(cls) -> Retry:
        """1 second wait doubling per attempt, stop after 3 attempts, no
        jitter."""
        return cls(
            stop_strategy=StopAfterAttempts(DEFAULT_MAX_ATTEMPTS),
            wait_strategy=WaitExponential(DEFAULT_WAIT, DEFAULT_MULTIPLIER),
            jitter_strategy=NoJitter(),
        )

    @classmethod
    def exponential_with_jitter(cls) -> Retry:
        """Same as :meth:`exponential` with full jitter."""
        return cls.exponential().with_jitter(FullJitter())

    def with_stop(self, stop_strategy: BaseStopStrategy) -> Retry:
        """Return a copy of this engine using another stop strategy.

        Args:
            stop_strategy: The new stop strategy.

        Returns:
            A new engine; this one is left unchanged.
        """
        return replace(self, stop_strategy=stop_strategy)

    def with_wait(self, wait_strategy: BaseWaitStrategy) -> Retry:
        """Return a copy of this engine using another wait strategy.

        Args:
            wait_strategy: The new wait strategy.

        Returns:
            A new engine; this one is left unchanged.
        """
        return replace(self, wait_strategy=wait_strategy)

    def with_jitter(self, jitter_strategy: BaseJitterStrategy) -> Retry:
        """Return a copy of this engine using another jitter strategy.

        Args:
            jitter_strategy: The new jitter strategy.

        Returns:
            A new engine; this one is left unchanged.
        """
        return replace(self, jitter_strategy=jitter_strategy)

    def calculate_wait_time(self, attempt: int) -> float:
        """Calculate the jittered delay after a failed attempt.

        Args:
            attempt: The index of the attempt that just failed
                (0-indexed).

        Returns:
            The delay in seconds to sleep before the next attempt.
        """
        return self.jitter_strategy.apply(self.wait_strategy.wait_duration(attempt))

    def call_with_info(
        self, operation: Callable[[], Result[T, E]]
    ) -> tuple[Result[T, E], RetryInfo]:
        """Run the retry loop and report how it went.

        The loop works as follows:
        1. Call the operation. ``Ok`` ends the loop immediately, even if
           the stop strategy would also fire.
        2. On ``Err``, ask the stop strategy with the attempt index and
           the elapsed time. If it fires, the loop ends with that
           ``Err``.
        3. Otherwise sleep for the jittered wait duration, increment the
           attempt index and go back to 1.

        A stop strategy that never fires combined with an operation that
        never succeeds loops forever.

        Args:
            operation: The zero-argument callable to run. It is called
                once per attempt.

        Returns:
            The result of the last attempt, and a :class:`RetryInfo`
            describing the execution.

        Raises:
            InvalidResultError: If the operation returns something other
                than ``Ok`` or ``Err``.
            Exception: Any exception raised by the operation, unchanged.
        """
        attempt = 0
        start_time = time.monotonic()

        while True:
            result = operation()
            if not isinstance(result, (Ok, Err)):
                raise InvalidResultError(result)
            elapsed = time.monotonic() - start_time

            if result.is_ok():
                if attempt > 0:
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Operation succeeded after {attempt} retries ({elapsed:.2f}s)",
                        attempt=attempt,
                        elapsed=elapsed,
                    )
                return result, RetryInfo(attempts=attempt, elapsed=elapsed)

            if self.stop_strategy.should_stop(attempt, elapsed):
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"Giving up after attempt {attempt} ({elapsed:.2f}s): {result.error!r}",
                    attempt=attempt,
                    elapsed=elapsed,
                )
                return result, RetryInfo(attempts=attempt, elapsed=elapsed)

            sleep_time = self.calculate_wait_time(attempt)
            log_structured(
                logger,
                logging.DEBUG,
                f"Attempt {attempt} failed: {result.error!r}, "
                f"waiting {sleep_time:.2f}s before retry",
                attempt=attempt,
                elapsed=elapsed,
                wait_time=sleep_time,
            )
            time.sleep(sleep_time)
            attempt += 1

    def call(self, operation: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Run the retry loop and return the result of the last attempt.

        This is :meth:`call_with_info` without the :class:`RetryInfo`.

        Args:
            operation: The zero-argument callable to run.

        Returns:
            The result of the last attempt.
        """
        result, _ = self.call_with_info(operation)
        return result

    def __call__(self, func: Callable[..., Result[T, E]]) -> Callable[..., Result[T, E]]:
        """Use the engine as a decorator.

        Every call to the decorated function runs the retry loop with
        the call arguments bound.

        Example:
            ```pycon
            >>> from aretry import Ok, Retry
            >>> @Retry.basic()
            ... def fetch(key: str):
            ...     return Ok(key.upper())
            ...
            >>> fetch("a")
            Ok(value='A')

            ```
        """

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, E]:
            return self.call(lambda: func(*args, **kwargs))

        return wrapper
