"""
Financial number helpers.

All ledger arithmetic runs on ``decimal.Decimal`` so that netting and
realized profit/loss stay exact. Floats are accepted at the edges and
converted through their string form.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from fxledger.exceptions.ledger import ValidationError

ZERO = Decimal(0)


def to_decimal(value: str | int | float | Decimal) -> Decimal:
    """Convert various numeric types to Decimal.

    Args:
        value: Numeric value to convert

    Returns:
        Decimal representation of the value

    Raises:
        ValidationError: If the value is not a finite number

    Examples:
        >>> to_decimal(50000)
        Decimal('50000')
        >>> to_decimal(1.1)
        Decimal('1.1')
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except InvalidOperation as e:
            raise ValidationError(f"Not a number: {value!r}") from e
    if not result.is_finite():
        raise ValidationError(f"Value must be finite, got {value!r}")
    return result


def sign(value: Decimal) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def set_scale(value: Decimal, scale: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Quantize ``value`` to exactly ``scale`` decimal places.

    Args:
        value: Amount to round
        scale: Number of decimal places to keep
        rounding: Decimal rounding mode

    Returns:
        Rounded Decimal
    """
    if scale < 0:
        raise ValidationError(f"Scale must be non-negative, got {scale}")
    return value.quantize(Decimal(1).scaleb(-scale), rounding=rounding)
