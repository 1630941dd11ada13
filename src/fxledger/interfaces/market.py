"""
Market data interface.

The ledger never fetches prices itself. It asks a market for quotes and
conversions, and a market answers ``None`` when it has no data.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from fxledger.enums import OfferSide
from fxledger.models.asset import Asset, Instrument
from fxledger.models.money import Money
from fxledger.models.quote import Quote


class IMarket(ABC):
    """Abstract interface for market quote lookup and conversion."""

    @property
    @abstractmethod
    def pivot(self) -> Asset:
        """Asset used as the default reporting currency and conversion hub."""
        pass

    @abstractmethod
    def quote(self, instrument: Instrument, amount: Decimal) -> Quote | None:
        """Get a quote good for ``amount`` units, or None if unavailable."""
        pass

    @abstractmethod
    def convert(
        self, money: Money, asset: Asset, side: OfferSide, amount: Decimal
    ) -> Money | None:
        """Convert ``money`` into ``asset`` on ``side``, or None if no path exists."""
        pass
