"""
Portfolio base class.

Holds the queries shared by both aggregation policies. Subclasses own the
storage layout and the way a diff is applied to it.
"""

from collections.abc import Iterator
from decimal import Decimal
from typing import Self

from fxledger.interfaces.market import IMarket
from fxledger.interfaces.portfolio import IPortfolio
from fxledger.models.asset import Asset, Instrument
from fxledger.models.diff import PortfolioDiff
from fxledger.models.money import Money
from fxledger.models.position import Position
from fxledger.types.financial import ZERO


class Portfolio(IPortfolio):
    """Shared portfolio behaviour.

    Snapshots are immutable: ``apply`` and ``ingest`` always return a new
    portfolio and leave ``self`` untouched.
    """

    def __lshift__(self, position: Position) -> tuple[Self, PortfolioDiff]:
        return self.ingest(position)

    def amount(self, instrument: Instrument) -> Decimal:
        return sum((p.amount for p in self.positions_for(instrument)), ZERO)

    def profit_loss(self, asset: Asset, market: IMarket) -> Money | None:
        total = ZERO
        for position in self.positions():
            value = position.profit_loss_in(asset, market)
            if value is None:
                return None
            total += value.amount
        return Money(total, asset)

    def profit_loss_pivot(self, market: IMarket) -> Money | None:
        """Unrealized profit/loss in the market's pivot asset."""
        return self.profit_loss(market.pivot, market)

    def __iter__(self) -> Iterator[Position]:
        return iter(list(self.positions()))

    def __len__(self) -> int:
        return sum(1 for _ in self.positions())

    def __contains__(self, instrument: object) -> bool:
        if not isinstance(instrument, Instrument):
            return False
        return any(True for _ in self.positions_for(instrument))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} positions)"
