r"""Stop strategy based on the number of attempts."""

from __future__ import annotations

__all__ = ["StopAfterAttempts"]

from aretry.stop.base import BaseStopStrategy
from aretry.utils.validation import validate_attempts


class StopAfterAttempts(BaseStopStrategy):
    """Stop once a given attempt index is reached.

    The strategy stops when ``attempt >= max_attempts``. Because attempt
    indices start at 0, ``max_attempts`` is the number of retries
    allowed after the initial call: ``StopAfterAttempts(0)`` gives up
    right after the first failure and ``StopAfterAttempts(3)`` allows
    four calls in total.

    Args:
        max_attempts: The attempt index at which to stop. Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterAttempts
        >>> stop = StopAfterAttempts(3)
        >>> [stop.should_stop(attempt, 0.0) for attempt in range(5)]
        [False, False, False, True, True]

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        validate_attempts("max_attempts", max_attempts)
        self.max_attempts = max_attempts

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return attempt >= self.max_attempts
