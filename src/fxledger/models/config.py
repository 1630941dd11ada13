"""
Ledger configuration model.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)

from fxledger.constants import (
    DEFAULT_BALANCE_SCALE,
    DEFAULT_PIVOT_ASSET,
    DEFAULT_ROUNDING,
    DEFAULT_SETTLEMENT_ASSET,
    MAX_BALANCE_SCALE,
    MIN_BALANCE_SCALE,
)
from fxledger.enums import PortfolioPolicy
from fxledger.exceptions.ledger import ConfigurationError
from fxledger.infrastructure.market.static_market import StaticMarket
from fxledger.models.account import Account
from fxledger.models.asset import Asset, asset_of
from fxledger.models.portfolio import Portfolio
from fxledger.models.portfolio_non_strict import NonStrictPortfolio
from fxledger.models.portfolio_strict import StrictPortfolio
from fxledger.models.quote import Quote

ROUNDING_MODES = frozenset(
    {
        ROUND_05UP,
        ROUND_CEILING,
        ROUND_DOWN,
        ROUND_FLOOR,
        ROUND_HALF_DOWN,
        ROUND_HALF_EVEN,
        ROUND_HALF_UP,
        ROUND_UP,
    }
)


@dataclass
class LedgerConfig:
    """Configuration for portfolios and accounts."""

    settlement_asset: Asset = field(default_factory=lambda: asset_of(DEFAULT_SETTLEMENT_ASSET))
    pivot_asset: Asset = field(default_factory=lambda: asset_of(DEFAULT_PIVOT_ASSET))
    balance_scale: int = DEFAULT_BALANCE_SCALE
    rounding: str = DEFAULT_ROUNDING
    policy: PortfolioPolicy = PortfolioPolicy.STRICT

    def is_valid_scale(self) -> bool:
        """Validate balance scale is within supported bounds."""
        return (
            isinstance(self.balance_scale, int)
            and not isinstance(self.balance_scale, bool)
            and MIN_BALANCE_SCALE <= self.balance_scale <= MAX_BALANCE_SCALE
        )

    def is_valid_rounding(self) -> bool:
        """Validate rounding is a decimal rounding mode."""
        return self.rounding in ROUNDING_MODES

    def validate(self) -> "LedgerConfig":
        """Raise ConfigurationError unless every setting is valid."""
        if not self.is_valid_scale():
            raise ConfigurationError(
                f"balance_scale must be between {MIN_BALANCE_SCALE} and {MAX_BALANCE_SCALE}, "
                f"got {self.balance_scale!r}"
            )
        if not self.is_valid_rounding():
            raise ConfigurationError(f"Unknown rounding mode: {self.rounding!r}")
        if not isinstance(self.policy, PortfolioPolicy):
            raise ConfigurationError(f"Unknown portfolio policy: {self.policy!r}")
        return self

    def create_portfolio(self) -> Portfolio:
        """Create an empty portfolio for the configured policy."""
        self.validate()
        if self.policy is PortfolioPolicy.STRICT:
            return StrictPortfolio()
        return NonStrictPortfolio()

    def create_account(self, portfolio: Portfolio | None = None) -> Account:
        """Create an empty account, with a fresh portfolio unless one is given."""
        self.validate()
        return Account(
            portfolio=portfolio if portfolio is not None else self.create_portfolio(),
            asset=self.settlement_asset,
            scale=self.balance_scale,
            rounding=self.rounding,
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "settlement_asset": self.settlement_asset.code,
            "pivot_asset": self.pivot_asset.code,
            "balance_scale": self.balance_scale,
            "rounding": self.rounding,
            "policy": self.policy.value,
        }

    def create_market(self, quotes: Iterable[Quote] = ()) -> StaticMarket:
        """Create an in-memory market pivoting on the configured asset."""
        return StaticMarket(quotes, pivot=self.pivot_asset)
