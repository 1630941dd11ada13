"""
Account domain model.

An account is a portfolio plus a settlement balance. Realized deals are
converted into the settlement asset and booked into the balance.
"""

from dataclasses import dataclass, field

from loguru import logger

from fxledger.constants import DEFAULT_BALANCE_SCALE, DEFAULT_ROUNDING, DEFAULT_SETTLEMENT_ASSET
from fxledger.exceptions.ledger import ValidationError
from fxledger.interfaces.market import IMarket
from fxledger.models.asset import Asset, asset_of
from fxledger.models.deal import Deal
from fxledger.models.diff import PortfolioDiff
from fxledger.models.money import Money
from fxledger.models.portfolio import Portfolio
from fxledger.models.position import Position
from fxledger.utils.decorators import log_ledger_operation
from fxledger.utils.validation import validate_scale


@dataclass(frozen=True)
class Account:
    """Immutable account snapshot.

    ``diff`` is the transition that produced this snapshot, kept for audit.
    A ``balance`` of None opens the account at zero in ``asset``.
    """

    portfolio: Portfolio
    asset: Asset = field(default_factory=lambda: asset_of(DEFAULT_SETTLEMENT_ASSET))
    balance: Money | None = None
    diff: PortfolioDiff | None = None
    scale: int = DEFAULT_BALANCE_SCALE
    rounding: str = DEFAULT_ROUNDING

    def __post_init__(self) -> None:
        """Validate scale and normalize the balance after initialization."""
        validate_scale(self.scale)
        balance = self.balance if self.balance is not None else Money.zero(self.asset)
        if balance.asset != self.asset and not balance.is_zero:
            raise ValidationError(
                f"Balance must be denominated in {self.asset}, got {balance.asset}"
            )
        object.__setattr__(
            self, "balance", Money(balance.amount, self.asset).set_scale(self.scale, self.rounding)
        )

    @property
    def last_deal(self) -> Deal | None:
        """Deal realized by the last applied transition, if any."""
        return self.diff.first_deal() if self.diff is not None else None

    @log_ledger_operation
    def ingest(self, position: Position, market: IMarket) -> "Account | None":
        """Book ``position`` and realize any resulting deal into the balance.

        Returns None, leaving this account untouched, when the market cannot
        convert the realized profit/loss into the settlement asset.
        """
        new_portfolio, diff = self.portfolio.ingest(position)
        deal = diff.first_deal()
        profit_loss = deal.profit_loss if deal is not None else Money.zero(self.asset)

        converted = market.convert(
            profit_loss, self.asset, position.side.close_side(), position.amount
        )
        if converted is None:
            logger.warning(
                f"No conversion from {profit_loss.asset} to {self.asset}, "
                f"skipping {position}"
            )
            return None

        balance = self.balance if self.balance is not None else Money.zero(self.asset)
        new_balance = (balance + converted).set_scale(self.scale, self.rounding)
        if deal is not None:
            logger.info(f"Realized {converted} on {position.instrument}, balance {new_balance}")

        return Account(
            portfolio=new_portfolio,
            asset=self.asset,
            balance=new_balance,
            diff=diff,
            scale=self.scale,
            rounding=self.rounding,
        )
