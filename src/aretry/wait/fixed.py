r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["WaitFixed"]

from aretry.utils.duration import saturate
from aretry.utils.validation import validate_non_negative
from aretry.wait.base import BaseWaitStrategy


class WaitFixed(BaseWaitStrategy):
    """Constant wait between attempts.

    Returns the same delay for every attempt, regardless of the attempt
    index.

    Args:
        delay: The delay in seconds (default: 1.0). Must be
            non-negative. Values above ``MAX_DURATION`` are clamped.

    Example:
        ```pycon
        >>> from aretry.wait import WaitFixed
        >>> wait = WaitFixed(0.5)
        >>> wait.wait_duration(0)
        0.5
        >>> wait.wait_duration(10)
        0.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        validate_non_negative("delay", delay)
        self.delay = saturate(delay)

    def wait_duration(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
