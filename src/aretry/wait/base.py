r"""Abstract base class for wait strategies and the additive combinator."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy", "WaitAdd"]

from abc import ABC, abstractmethod

from aretry.utils.duration import saturate


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to sleep after a failed attempt
    before the next one, based only on the attempt index. It must
    return the same duration every time it is asked about the same
    attempt.

    Two wait strategies combine with ``+`` (or :meth:`add`) into a
    strategy returning the sum of both durations. The combined strategy
    is itself a wait strategy, so combinations nest freely.
    """

    @abstractmethod
    def wait_duration(self, attempt: int) -> float:
        """Calculate the delay after a failed attempt.

        Args:
            attempt: The index of the attempt that just failed
                (0-indexed). The returned delay is slept before attempt
                ``attempt + 1``.

        Returns:
            The delay in seconds.
        """

    def add(self, other: BaseWaitStrategy) -> WaitAdd:
        """Combine with another wait strategy by summing their delays.

        Args:
            other: The other wait strategy.

        Returns:
            A strategy whose delay is the sum of both operands.
        """
        return WaitAdd(self, other)

    def __add__(self, other: BaseWaitStrategy) -> WaitAdd:
        if not isinstance(other, BaseWaitStrategy):
            return NotImplemented
        return self.add(other)


class WaitAdd(BaseWaitStrategy):
    """Sum the delays of two wait strategies.

    Typically used to put a constant floor under a growing backoff. The
    sum saturates at ``MAX_DURATION``.

    Args:
        left: The first wait strategy.
        right: The second wait strategy.

    Example:
        ```pycon
        >>> from aretry.wait import WaitExponential, WaitFixed
        >>> wait = WaitExponential(base_delay=1.0, multiplier=2.0) + WaitFixed(1.0)
        >>> [wait.wait_duration(attempt) for attempt in range(3)]
        [2.0, 3.0, 5.0]

        ```
    """

    def __init__(self, left: BaseWaitStrategy, right: BaseWaitStrategy) -> None:
        self.left = left
        self.right = right

    def wait_duration(self, attempt: int) -> float:
        return saturate(self.left.wait_duration(attempt) + self.right.wait_duration(attempt))
