"""
Deal domain model.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fxledger.models.money import Money
from fxledger.protocols import IPosition


@dataclass(frozen=True)
class Deal:
    """Realized result of a full or partial close.

    ``position`` is the closed position, or the closed slice of it for a
    partial close. ``profit_loss`` is denominated in the instrument's
    secondary asset.
    """

    position: IPosition
    close_price: Decimal
    close_timestamp: datetime
    profit_loss: Money

    @property
    def open_price(self) -> Decimal:
        return self.position.price

    @property
    def amount(self) -> Decimal:
        return self.position.amount

    def __str__(self) -> str:
        return (
            f"DEAL {self.position.instrument} {self.position.side} {self.amount} "
            f"@ {self.open_price} -> {self.close_price}: {self.profit_loss}"
        )
