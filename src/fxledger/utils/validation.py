"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from decimal import Decimal

from fxledger.constants import MAX_BALANCE_SCALE, MIN_BALANCE_SCALE
from fxledger.exceptions.ledger import InstrumentMismatchError, ValidationError
from fxledger.models.asset import Instrument


def validate_same_instrument(expected: Instrument, actual: Instrument) -> Instrument:
    """Validate that two positions trade the same instrument.

    Args:
        expected: Instrument of the position being merged into
        actual: Instrument of the other position

    Returns:
        The validated instrument

    Raises:
        InstrumentMismatchError: If instruments differ
    """
    if expected != actual:
        raise InstrumentMismatchError(expected, actual)
    return expected


def validate_non_negative(value: Decimal, param_name: str) -> Decimal:
    """Validate that a numeric value is zero or positive."""
    if value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value


def validate_scale(scale: int, param_name: str = "scale") -> int:
    """Validate that a decimal scale is within supported bounds.

    Raises:
        ValidationError: If scale is not an int in the supported range
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValidationError(f"{param_name} must be an integer, got {type(scale).__name__}")
    if not MIN_BALANCE_SCALE <= scale <= MAX_BALANCE_SCALE:
        raise ValidationError(
            f"{param_name} must be between {MIN_BALANCE_SCALE} and {MAX_BALANCE_SCALE}, "
            f"got {scale}"
        )
    return scale
