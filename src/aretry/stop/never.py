r"""Stop strategy that never gives up."""

from __future__ import annotations

__all__ = ["StopNever"]

from aretry.stop.base import BaseStopStrategy


class StopNever(BaseStopStrategy):
    """Never stop retrying.

    The retry loop only ends when the operation succeeds. Combine it
    with another strategy, or make sure the operation eventually
    succeeds, otherwise the loop runs forever.

    Example:
        ```pycon
        >>> from aretry.stop import StopNever
        >>> StopNever().should_stop(1000, 3600.0)
        False

        ```
    """

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return False
