"""
Money value type.

A signed decimal amount denominated in one asset. Position legs, realized
profit/loss and account balances are all Money.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from fxledger.exceptions.ledger import ValidationError
from fxledger.models.asset import Asset
from fxledger.types.financial import ZERO, set_scale, to_decimal


@dataclass(frozen=True)
class Money:
    """Signed amount of an asset."""

    amount: Decimal
    asset: Asset

    def __post_init__(self) -> None:
        # Normalize ints/floats/strings into Decimal
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @classmethod
    def zero(cls, asset: Asset) -> "Money":
        """Zero amount of ``asset``."""
        return cls(ZERO, asset)

    @property
    def is_zero(self) -> bool:
        return self.amount == ZERO

    def _combine(self, other: "Money", operation: str) -> Asset:
        if self.asset == other.asset:
            return self.asset
        # Zero of any asset is the additive identity
        if other.is_zero:
            return self.asset
        if self.is_zero:
            return other.asset
        raise ValidationError(f"Cannot {operation} {other.asset} to {self.asset}")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount, self._combine(other, "add"))

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.amount - other.amount, self._combine(other, "subtract"))

    def __neg__(self) -> "Money":
        return Money(-self.amount, self.asset)

    def __abs__(self) -> "Money":
        return Money(abs(self.amount), self.asset)

    def set_scale(self, scale: int, rounding: str = ROUND_HALF_UP) -> "Money":
        """Round the amount to a fixed number of decimal places."""
        return Money(set_scale(self.amount, scale, rounding), self.asset)

    def __str__(self) -> str:
        return f"{self.amount} {self.asset.code}"
