r"""Wait strategies computing the delay between attempts.

This package provides fixed and exponential wait strategies, and the
additive combinator used by ``+``.
"""

from __future__ import annotations

__all__ = ["BaseWaitStrategy", "WaitAdd", "WaitExponential", "WaitFixed"]

from aretry.wait.base import BaseWaitStrategy, WaitAdd
from aretry.wait.exponential import WaitExponential
from aretry.wait.fixed import WaitFixed
