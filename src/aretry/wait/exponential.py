r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["WaitExponential"]

from aretry.utils.duration import MAX_DURATION, saturate
from aretry.utils.validation import validate_non_negative
from aretry.wait.base import BaseWaitStrategy


class WaitExponential(BaseWaitStrategy):
    """Exponential backoff.

    Calculates delay as: base_delay * (multiplier ** attempt).

    The growth factor is computed once per call and then scales the
    base delay, so no rounding error accumulates across attempts. Very
    large attempt indices saturate at ``MAX_DURATION`` instead of
    overflowing.

    Args:
        base_delay: The delay in seconds after the first failure
            (default: 1.0). Must be non-negative.
        multiplier: The growth factor applied per attempt
            (default: 2.0). Must be non-negative; values below 1 make
            the delay shrink.

    Example:
        ```pycon
        >>> from aretry.wait import WaitExponential
        >>> wait = WaitExponential(base_delay=1.0, multiplier=2.0)
        >>> [wait.wait_duration(attempt) for attempt in range(4)]
        [1.0, 2.0, 4.0, 8.0]
        >>> wait.wait_duration(100_000) == wait.wait_duration(200_000)  # saturated
        True

        ```
    """

    def __init__(self, base_delay: float = 1.0, multiplier: float = 2.0) -> None:
        validate_non_negative("base_delay", base_delay)
        validate_non_negative("multiplier", multiplier)
        self.base_delay = base_delay
        self.multiplier = multiplier

    def wait_duration(self, attempt: int) -> float:
        try:
            factor = float(self.multiplier) ** attempt
        except OverflowError:
            return MAX_DURATION if self.base_delay > 0 else 0.0
        if self.base_delay == 0:
            # 0 * inf is nan
            return 0.0
        return saturate(self.base_delay * factor)
