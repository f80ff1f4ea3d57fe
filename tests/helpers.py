r"""Shared test helpers for the retry engine tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

from aretry import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable


class FakeClock:
    """Deterministic replacement for ``time.monotonic`` and
    ``time.sleep``.

    Attributes:
        now: The current time in seconds.
        sleeps: The durations passed to ``sleep``, in order.
    """

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def slow(self, operation: Callable[[], Any], seconds: float) -> Callable[[], Any]:
        """Wrap ``operation`` so that each call takes ``seconds``."""

        def wrapper() -> Any:
            self.advance(seconds)
            return operation()

        return wrapper


def failing_then_succeeding(failures: int, value: Any = "ok", error: Any = "error") -> Mock:
    """Create an operation that fails ``failures`` times then succeeds.

    Args:
        failures: Number of ``Err`` results before the first ``Ok``.
        value: The success value.
        error: The failure value.

    Returns:
        A mock operation; its ``call_count`` tells how many attempts ran.
    """
    return Mock(side_effect=[Err(error)] * failures + [Ok(value)])


def always_failing(error: Any = "error") -> Mock:
    """Create an operation that always returns ``Err(error)``."""
    return Mock(return_value=Err(error))
