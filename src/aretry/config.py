r"""Configuration constants and a declarative retry configuration.

This module provides the default values used by the presets and a
dataclass-based configuration object that builds a :class:`~aretry.Retry`
from plain values, which is convenient when retry settings come from a
settings file or environment variables.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_WAIT",
    "JITTER_STRATEGIES",
    "MAX_DURATION",
    "RETRY_STATUS_CODES",
    "RetryConfig",
]

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.jitter import EqualJitter, FullJitter, NoJitter
from aretry.stop import BaseStopStrategy, StopAfterAttempts, StopAfterDelay, StopNever
from aretry.utils.duration import MAX_DURATION
from aretry.utils.validation import (
    validate_attempts,
    validate_non_negative,
    validate_optional_non_negative,
)
from aretry.wait import BaseWaitStrategy, WaitExponential, WaitFixed

if TYPE_CHECKING:
    from aretry.retry import Retry

# Default attempt index at which the presets give up
# Total calls = DEFAULT_MAX_ATTEMPTS + 1 (initial attempt)
DEFAULT_MAX_ATTEMPTS = 3

# Default wait in seconds (fixed delay, or first delay of exponential backoff)
DEFAULT_WAIT = 1.0

# Default growth factor for exponential backoff
# With 1.0s base: 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_MULTIPLIER = 2.0

# HTTP status codes that are worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

JITTER_STRATEGIES = {
    "none": NoJitter,
    "full": FullJitter,
    "equal": EqualJitter,
}


@dataclass
class RetryConfig:
    """Declarative description of a retry engine.

    Args:
        max_attempts: Attempt index at which to give up, or ``None`` for
            no attempt limit. Must be >= 0.
        max_delay: Time budget in seconds, or ``None`` for no time
            limit. Must be non-negative.
        wait: Fixed delay, or first delay when ``multiplier`` is set, in
            seconds. Must be non-negative.
        multiplier: Growth factor for exponential backoff, or ``None``
            for a fixed wait. Must be non-negative.
        min_wait: Constant added on top of every delay, in seconds.
            Must be non-negative.
        jitter: Name of the jitter strategy: ``"none"``, ``"full"`` or
            ``"equal"``.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(max_attempts=5, max_delay=30.0, multiplier=2.0)
        >>> retry = config.build()
        >>> retry.wait_strategy.wait_duration(3)
        8.0
        >>> retry.stop_strategy.should_stop(5, 1.0)
        True
        >>> config.merge(jitter="full").jitter
        'full'

        ```
    """

    max_attempts: int | None = DEFAULT_MAX_ATTEMPTS
    max_delay: float | None = None
    wait: float = DEFAULT_WAIT
    multiplier: float | None = None
    min_wait: float = 0.0
    jitter: str = "none"

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If ``max_attempts`` is not an integer.
            ValueError: If any parameter fails validation.
        """
        if self.max_attempts is not None:
            validate_attempts("max_attempts", self.max_attempts)
        validate_optional_non_negative("max_delay", self.max_delay)
        validate_non_negative("wait", self.wait)
        validate_optional_non_negative("multiplier", self.multiplier)
        validate_non_negative("min_wait", self.min_wait)
        if self.jitter not in JITTER_STRATEGIES:
            msg = f"jitter must be one of {sorted(JITTER_STRATEGIES)}, got {self.jitter!r}"
            raise ValueError(msg)

    def build_stop_strategy(self) -> BaseStopStrategy:
        stop: BaseStopStrategy | None = None
        if self.max_attempts is not None:
            stop = StopAfterAttempts(self.max_attempts)
        if self.max_delay is not None:
            by_delay = StopAfterDelay(self.max_delay)
            stop = by_delay if stop is None else stop | by_delay
        return StopNever() if stop is None else stop

    def build_wait_strategy(self) -> BaseWaitStrategy:
        wait: BaseWaitStrategy
        if self.multiplier is None:
            wait = WaitFixed(self.wait)
        else:
            wait = WaitExponential(self.wait, self.multiplier)
        if self.min_wait > 0:
            wait = wait + WaitFixed(self.min_wait)
        return wait

    def build(self) -> Retry:
        """Build the retry engine described by this configuration.

        Returns:
            A new :class:`~aretry.Retry`.
        """
        from aretry.retry import Retry  # noqa: PLC0415

        return Retry(
            stop_strategy=self.build_stop_strategy(),
            wait_strategy=self.build_wait_strategy(),
            jitter_strategy=JITTER_STRATEGIES[self.jitter](),
        )

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so optional settings
        cannot be disabled through ``merge``; use
        ``dataclasses.replace`` for that.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new, validated, ``RetryConfig``.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary.

        Returns:
            The configuration parameters, suitable for
            ``RetryConfig(**params)``.
        """
        return asdict(self)
