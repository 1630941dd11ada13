"""
Shared pytest fixtures for ledger tests.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from fxledger.infrastructure.market import StaticMarket
from fxledger.models.asset import CurrencyAsset, Instrument
from fxledger.models.quote import Quote


@pytest.fixture
def eur() -> CurrencyAsset:
    return CurrencyAsset("EUR")


@pytest.fixture
def usd() -> CurrencyAsset:
    return CurrencyAsset("USD")


@pytest.fixture
def jpy() -> CurrencyAsset:
    return CurrencyAsset("JPY")


@pytest.fixture
def eurusd(eur: CurrencyAsset, usd: CurrencyAsset) -> Instrument:
    return Instrument(eur, usd)


@pytest.fixture
def usdjpy(usd: CurrencyAsset, jpy: CurrencyAsset) -> Instrument:
    return Instrument(usd, jpy)


@pytest.fixture
def timestamp() -> datetime:
    return datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def market(eurusd: Instrument, usdjpy: Instrument, timestamp: datetime) -> StaticMarket:
    """EUR/USD and USD/JPY quotes, pivoting on USD."""
    return StaticMarket(
        [
            Quote(eurusd, bid=Decimal("1.1050"), ask=Decimal("1.1052"), timestamp=timestamp),
            Quote(usdjpy, bid=Decimal("150.00"), ask=Decimal("150.02"), timestamp=timestamp),
        ],
        pivot=CurrencyAsset("USD"),
    )
