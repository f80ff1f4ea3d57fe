r"""Helpers for working with durations expressed in seconds.

All durations handled by ``aretry`` are ``float`` seconds. This module
holds the representable upper bound and the conversions shared by the
wait and jitter strategies.
"""

from __future__ import annotations

__all__ = ["MAX_DURATION", "saturate", "to_millis"]

import math
import threading

# Largest timeout the platform accepts for a blocking wait.
# Wait strategies clamp to this value instead of overflowing.
MAX_DURATION: float = threading.TIMEOUT_MAX


def saturate(duration: float) -> float:
    """Clamp a duration to ``[0, MAX_DURATION]``.

    ``inf`` and ``nan`` produced by overflowing arithmetic are mapped to
    ``MAX_DURATION``.

    Args:
        duration: The duration in seconds.

    Returns:
        The clamped duration.

    Example:
        ```pycon
        >>> from aretry.utils.duration import MAX_DURATION, saturate
        >>> saturate(2.5)
        2.5
        >>> saturate(float("inf")) == MAX_DURATION
        True

        ```
    """
    if math.isnan(duration) or duration > MAX_DURATION:
        return MAX_DURATION
    return max(duration, 0.0)


def to_millis(duration: float) -> int:
    """Convert a duration in seconds to whole milliseconds.

    The value is first rounded to the microsecond, which absorbs binary
    floating point noise (``0.57 * 1000 == 569.999...``), then truncated
    to the millisecond.

    Args:
        duration: The duration in seconds.

    Returns:
        The number of whole milliseconds in ``duration``.

    Example:
        ```pycon
        >>> from aretry.utils.duration import to_millis
        >>> to_millis(0.57)
        570
        >>> to_millis(1.2349)
        1234
        >>> to_millis(0.0004)
        0

        ```
    """
    return round(duration * 1_000_000) // 1000
