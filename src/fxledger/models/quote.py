"""
Quote domain model.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import assert_never

from fxledger.enums import OfferSide
from fxledger.exceptions.ledger import ValidationError
from fxledger.models.asset import Instrument
from fxledger.types.financial import ZERO


@dataclass(frozen=True)
class Quote:
    """Two-way price snapshot for an instrument.

    Either side may be missing. ``max_amount`` caps the size the quote is
    good for; ``None`` means unlimited.
    """

    instrument: Instrument
    bid: Decimal | None = None
    ask: Decimal | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    max_amount: Decimal | None = None

    def __post_init__(self) -> None:
        """Validate quote prices after initialization."""
        for name in ("bid", "ask"):
            price = getattr(self, name)
            if price is not None and price <= ZERO:
                raise ValidationError(f"Quote {name} must be positive, got {price}")
        if self.bid is not None and self.ask is not None and self.bid > self.ask:
            raise ValidationError(f"Crossed quote for {self.instrument}: {self.bid} > {self.ask}")

    def price(self, side: OfferSide) -> Decimal | None:
        """Price on the given side, if quoted."""
        match side:
            case OfferSide.BID:
                return self.bid
            case OfferSide.ASK:
                return self.ask
            case _:
                assert_never(side)

    @property
    def mid(self) -> Decimal | None:
        if self.bid is None or self.ask is None:
            return None
        return (self.bid + self.ask) / 2

    def covers(self, amount: Decimal) -> bool:
        """Check if the quote is good for ``amount`` units."""
        return self.max_amount is None or amount <= self.max_amount
