r"""Utility helpers shared by the retry strategies and the retry engine.

This package provides duration helpers (clamping and millisecond
conversion), parameter validation, and opt-in structured logging.
"""

from __future__ import annotations

__all__ = [
    "MAX_DURATION",
    "saturate",
    "to_millis",
    "validate_attempts",
    "validate_non_negative",
    "validate_optional_non_negative",
]

from aretry.utils.duration import MAX_DURATION, saturate, to_millis
from aretry.utils.validation import (
    validate_attempts,
    validate_non_negative,
    validate_optional_non_negative,
)
