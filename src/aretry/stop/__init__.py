r"""Stop strategies deciding when the retry loop gives up.

This package provides the never-stop, attempt-count and elapsed-time
strategies, and the OR combinator used by ``|``.
"""

from __future__ import annotations

__all__ = [
    "BaseStopStrategy",
    "StopAfterAttempts",
    "StopAfterDelay",
    "StopNever",
    "StopOr",
]

from aretry.stop.attempts import StopAfterAttempts
from aretry.stop.base import BaseStopStrategy, StopOr
from aretry.stop.delay import StopAfterDelay
from aretry.stop.never import StopNever
