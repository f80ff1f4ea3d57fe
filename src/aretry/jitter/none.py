r"""Identity jitter strategy."""

from __future__ import annotations

__all__ = ["NoJitter"]

from aretry.jitter.base import BaseJitterStrategy


class NoJitter(BaseJitterStrategy):
    """Leave the delay unchanged.

    This is the default jitter strategy of every preset except
    ``Retry.exponential_with_jitter``.

    Example:
        ```pycon
        >>> from aretry.jitter import NoJitter
        >>> NoJitter().apply(1.5)
        1.5

        ```
    """

    def apply(self, duration: float) -> float:
        return duration
