r"""Equal jitter strategy."""

from __future__ import annotations

__all__ = ["EqualJitter"]

import random

from aretry.jitter.base import BaseJitterStrategy
from aretry.utils.duration import saturate, to_millis


class EqualJitter(BaseJitterStrategy):
    """Keep half of the delay and randomize the other half.

    Returns ``duration / 2 + sample`` where ``sample`` is drawn
    uniformly from ``[0, half)`` with millisecond granularity, so the
    result lies in ``[duration / 2, duration)``. Delays under one
    millisecond are returned unchanged, and a one millisecond delay,
    whose random half is empty, returns its exact half. Infinite or NaN
    delays are clamped to ``MAX_DURATION`` first.

    Compared to :class:`~aretry.jitter.FullJitter`, this guarantees a
    minimum wait while still spreading retries.

    Example:
        ```pycon
        >>> from aretry.jitter import EqualJitter
        >>> jitter = EqualJitter()
        >>> 1.0 <= jitter.apply(2.0) < 2.0
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
        half = duration / 2
        half_millis = millis // 2
        if half_millis == 0:
            return half
        return half + random.randrange(half_millis) / 1000  # noqa: S311
