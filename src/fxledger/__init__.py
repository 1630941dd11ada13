"""
Position netting and portfolio bookkeeping for a trading ledger.
"""

from fxledger.enums import OfferSide, PortfolioPolicy, PositionSide
from fxledger.exceptions.ledger import LedgerException
from fxledger.infrastructure.market import StaticMarket
from fxledger.models.account import Account
from fxledger.models.asset import Asset, CurrencyAsset, Instrument
from fxledger.models.config import LedgerConfig
from fxledger.models.deal import Deal
from fxledger.models.diff import (
    AddPosition,
    CreateDeal,
    ModifyPosition,
    PortfolioAction,
    PortfolioDiff,
    RemovePosition,
)
from fxledger.models.money import Money
from fxledger.models.portfolio_non_strict import NonStrictPortfolio
from fxledger.models.portfolio_strict import StrictPortfolio
from fxledger.models.position import Position
from fxledger.models.quote import Quote

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AddPosition",
    "Asset",
    "CreateDeal",
    "CurrencyAsset",
    "Deal",
    "Instrument",
    "LedgerConfig",
    "LedgerException",
    "ModifyPosition",
    "Money",
    "NonStrictPortfolio",
    "OfferSide",
    "PortfolioAction",
    "PortfolioDiff",
    "PortfolioPolicy",
    "Position",
    "PositionSide",
    "Quote",
    "RemovePosition",
    "StaticMarket",
    "StrictPortfolio",
]
