r"""Stop strategy based on the elapsed time."""

from __future__ import annotations

__all__ = ["StopAfterDelay"]

from aretry.stop.base import BaseStopStrategy
from aretry.utils.validation import validate_non_negative


class StopAfterDelay(BaseStopStrategy):
    """Stop once more than a given time has elapsed.

    The comparison is strict: a failure observed exactly at
    ``max_delay`` seconds is still retried. The check only happens after
    a failed attempt, so the total time can overshoot ``max_delay`` by
    one wait plus one attempt.

    Args:
        max_delay: The time budget in seconds. Must be non-negative.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterDelay
        >>> stop = StopAfterDelay(5.0)
        >>> stop.should_stop(1, 5.0)
        False
        >>> stop.should_stop(1, 5.001)
        True

        ```
    """

    def __init__(self, max_delay: float) -> None:
        validate_non_negative("max_delay", max_delay)
        self.max_delay = max_delay

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return elapsed > self.max_delay
