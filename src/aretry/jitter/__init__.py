r"""Jitter strategies randomizing the delay between attempts.

This package provides the identity strategy used by default, and the
full and equal jitter schemes.
"""

from __future__ import annotations

__all__ = ["BaseJitterStrategy", "EqualJitter", "FullJitter", "NoJitter"]

from aretry.jitter.base import BaseJitterStrategy
from aretry.jitter.equal import EqualJitter
from aretry.jitter.full import FullJitter
from aretry.jitter.none import NoJitter
