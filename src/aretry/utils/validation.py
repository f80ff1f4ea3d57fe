r"""Parameter validation utilities for retry strategies.

This module provides validation functions used by the strategy
constructors and the configuration layer to reject values that would
make a retry policy meaningless (negative delays, negative attempt
counts).
"""

from __future__ import annotations

__all__ = ["validate_attempts", "validate_non_negative", "validate_optional_non_negative"]


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_non_negative
        >>> validate_non_negative("delay", 1.5)
        >>> validate_non_negative("delay", 0.0)
        >>> validate_non_negative("delay", -1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1.0

        ```
    """
    if not value >= 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_optional_non_negative(name: str, value: float | None) -> None:
    """Validate an optional numeric parameter.

    ``None`` is accepted and means the parameter is disabled.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate, or ``None``.

    Raises:
        ValueError: If ``value`` is not ``None`` and negative or NaN.
    """
    if value is not None:
        validate_non_negative(name, value)


def validate_attempts(name: str, value: int) -> None:
    """Validate an attempt count.

    Args:
        name: The parameter name, used in the error message.
        value: The attempt count to validate.

    Raises:
        TypeError: If ``value`` is not an integer.
        ValueError: If ``value`` is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_attempts
        >>> validate_attempts("max_attempts", 3)
        >>> validate_attempts("max_attempts", 0)

        ```
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
