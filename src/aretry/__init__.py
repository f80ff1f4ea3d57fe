r"""aretry - Composable retry strategies for fallible operations.

This package runs a caller-supplied operation until it succeeds or a
stopping condition is met, waiting between attempts. The policy is
split into three independent axes, each a small strategy object:

    - Stop strategies decide when to give up. They combine with ``|``:
      ``StopAfterAttempts(5) | StopAfterDelay(30.0)`` stops at whichever
      limit is hit first.
    - Wait strategies compute the delay after a failure. They combine
      with ``+``: ``WaitExponential(1.0, 2.0) + WaitFixed(0.5)`` adds a
      constant floor to the backoff.
    - Jitter strategies randomize that delay (none, full or equal
      jitter).

Composite strategies are strategies themselves and nest freely.

Example:
    ```pycon
    >>> from aretry import Err, Ok, Retry
    >>> from aretry.stop import StopAfterAttempts
    >>> from aretry.wait import WaitFixed
    >>> outcomes = iter([Err("busy"), Ok(42)])
    >>> retry = Retry.basic().with_stop(StopAfterAttempts(3)).with_wait(WaitFixed(0.01))
    >>> retry.call(lambda: next(outcomes))
    Ok(value=42)

    ```
"""

from __future__ import annotations

__all__ = [
    "Err",
    "Ok",
    "Result",
    "Retry",
    "RetryConfig",
    "RetryInfo",
    "__version__",
    "catching",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.config import RetryConfig
from aretry.result import Err, Ok, Result, catching
from aretry.retry import Retry, RetryInfo

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
