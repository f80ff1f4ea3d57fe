r"""Abstract base class for jitter strategies."""

from __future__ import annotations

__all__ = ["BaseJitterStrategy"]

from abc import ABC, abstractmethod


class BaseJitterStrategy(ABC):
    """Abstract base class for jitter strategies.

    A jitter strategy randomizes the delay computed by a wait strategy
    so that independent clients failing at the same moment do not all
    retry at the same moment.
    """

    @abstractmethod
    def apply(self, duration: float) -> float:
        """Randomize a delay.

        Args:
            duration: The delay in seconds computed by the wait
                strategy.

        Returns:
            The delay in seconds to actually sleep. A zero input must
            return zero.
        """
