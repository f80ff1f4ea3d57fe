r"""Full jitter strategy."""

from __future__ import annotations

__all__ = ["FullJitter"]

import random

from aretry.jitter.base import BaseJitterStrategy
from aretry.utils.duration import saturate, to_millis


class FullJitter(BaseJitterStrategy):
    """Replace the delay with a uniform sample in ``[0, duration)``.

    The sample is drawn with millisecond granularity and the upper
    bound is exclusive, so a nonzero delay always comes back strictly
    shorter. Delays under one millisecond are returned unchanged since
    there is nothing to sample from. Infinite or NaN delays are clamped
    to ``MAX_DURATION`` first.

    This gives the best spread between competing clients at the cost of
    sometimes retrying almost immediately.

    Example:
        ```pycon
        >>> from aretry.jitter import FullJitter
        >>> jitter = FullJitter()
        >>> 0.0 <= jitter.apply(2.0) < 2.0
        True
        >>> jitter.apply(0.0)
        0.0

        ```
    """

    def apply(self, duration: float) -> float:
        duration = saturate(duration)
        millis = to_millis(duration)
        if millis == 0:
            return duration
        return random.randrange(millis) / 1000  # noqa: S311
