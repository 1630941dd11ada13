"""
Portfolio management interfaces.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal
from typing import Self

from fxledger.interfaces.market import IMarket
from fxledger.models.asset import Asset, Instrument
from fxledger.models.diff import PortfolioDiff
from fxledger.models.money import Money
from fxledger.models.position import Position


class IPortfolio(ABC):
    """Abstract interface for an immutable book of open positions."""

    @abstractmethod
    def apply(self, diff: PortfolioDiff) -> Self:
        """Apply a diff and return the new snapshot."""
        pass

    @abstractmethod
    def ingest(self, position: Position) -> tuple[Self, PortfolioDiff]:
        """Net an incoming position into the book."""
        pass

    @abstractmethod
    def positions(self) -> Iterable[Position]:
        """All open positions."""
        pass

    @abstractmethod
    def positions_for(self, instrument: Instrument) -> Iterable[Position]:
        """Open positions on one instrument."""
        pass

    @abstractmethod
    def amount(self, instrument: Instrument) -> Decimal:
        """Total open amount on one instrument."""
        pass

    @abstractmethod
    def profit_loss(self, asset: Asset, market: IMarket) -> Money | None:
        """Unrealized profit/loss of the whole book in ``asset``."""
        pass
