r"""Abstract base class for stop strategies and the OR combinator."""

from __future__ import annotations

__all__ = ["BaseStopStrategy", "StopOr"]

from abc import ABC, abstractmethod


class BaseStopStrategy(ABC):
    """Abstract base class for stop strategies.

    A stop strategy decides whether the retry loop should give up after
    a failed attempt. It receives the attempt index and the elapsed time
    and must not keep any state between calls.

    Two stop strategies combine with ``|`` (or :meth:`or_`) into a
    strategy that stops as soon as either of them does. The combined
    strategy is itself a stop strategy, so combinations nest freely.
    """

    @abstractmethod
    def should_stop(self, attempt: int, elapsed: float) -> bool:
        """Decide whether to stop retrying.

        Args:
            attempt: The index of the attempt that just failed
                (0-indexed). For example, attempt=0 is the initial call,
                attempt=1 is the first retry, etc.
            elapsed: Seconds elapsed since the first attempt started.

        Returns:
            ``True`` to give up and return the last failure, ``False``
            to wait and try again.
        """

    def or_(self, other: BaseStopStrategy) -> StopOr:
        """Combine with another stop strategy using logical OR.

        Args:
            other: The other stop strategy.

        Returns:
            A strategy that stops when either operand stops.
        """
        return StopOr(self, other)

    def __or__(self, other: BaseStopStrategy) -> StopOr:
        if not isinstance(other, BaseStopStrategy):
            return NotImplemented
        return self.or_(other)


class StopOr(BaseStopStrategy):
    """Stop when either of two stop strategies says so.

    This is the usual "whichever comes first" policy, e.g. at most five
    attempts or at most thirty seconds.

    Args:
        left: The first stop strategy.
        right: The second stop strategy.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterAttempts, StopAfterDelay
        >>> stop = StopAfterAttempts(3) | StopAfterDelay(5.0)
        >>> stop.should_stop(2, 1.0)
        False
        >>> stop.should_stop(3, 1.0)  # too many attempts
        True
        >>> stop.should_stop(2, 10.0)  # too much time
        True

        ```
    """

    def __init__(self, left: BaseStopStrategy, right: BaseStopStrategy) -> None:
        self.left = left
        self.right = right

    def should_stop(self, attempt: int, elapsed: float) -> bool:
        return self.left.should_stop(attempt, elapsed) or self.right.should_stop(
            attempt, elapsed
        )
