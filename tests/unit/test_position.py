"""
Unit tests for Position domain model.
Covers construction, derived fields and profit/loss helpers.
"""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from fxledger.enums import PositionSide
from fxledger.exceptions.ledger import InvalidPositionError, UnsupportedInstrumentError
from fxledger.infrastructure.market import StaticMarket
from fxledger.models.asset import Asset, CurrencyAsset, Instrument
from fxledger.models.money import Money
from fxledger.models.position import Position
from fxledger.models.quote import Quote


class TestPositionConstruction:
    """Construction and leg invariants."""

    def test_should_create_long_position_from_price_and_amount(
        self, eurusd: Instrument, timestamp: datetime
    ) -> None:
        """Test the factory builds opposite-signed legs."""
        position = Position.create(eurusd, Decimal("1.1000"), Decimal(100000), timestamp=timestamp)

        assert position.primary == Money(Decimal(100000), eurusd.primary)
        assert position.secondary == Money(Decimal("-110000"), eurusd.secondary)
        assert position.timestamp == timestamp
        assert position.match_id is None

    def test_should_derive_fields_from_legs(self, eurusd: Instrument) -> None:
        """Test instrument, price, side and amount are derived."""
        position = Position(
            Money(Decimal(-40000), eurusd.primary), Money(Decimal(44800), eurusd.secondary)
        )

        assert position.instrument == eurusd
        assert position.price == Decimal("1.12")
        assert position.side == PositionSide.SHORT
        assert position.amount == Decimal(40000)

    def test_should_reject_legs_with_same_sign(self, eur: Asset, usd: Asset) -> None:
        """Test construction fails when both legs share a sign."""
        with pytest.raises(InvalidPositionError):
            Position(Money(Decimal(100), eur), Money(Decimal(110), usd))
        with pytest.raises(InvalidPositionError):
            Position(Money(Decimal(-100), eur), Money(Decimal(-110), usd))

    def test_should_reject_zero_amount(self, eurusd: Instrument) -> None:
        """Test a zero-sized position cannot exist."""
        with pytest.raises(InvalidPositionError):
            Position.create(eurusd, Decimal("1.1"), Decimal(0))

    @pytest.mark.parametrize("amount", [Decimal(1), Decimal(-1), Decimal("0.5"), Decimal(-250000)])
    def test_should_accept_opposite_signed_legs(self, eurusd: Instrument, amount: Decimal) -> None:
        """Test any non-zero amount at a positive price is valid."""
        position = Position.create(eurusd, Decimal("1.2345"), amount)
        assert position.amount == abs(amount)

    def test_should_assign_distinct_ids(self, eurusd: Instrument) -> None:
        """Test every position gets its own identifier."""
        first = Position.create(eurusd, "1.1", 1000)
        second = Position.create(eurusd, "1.1", 1000)
        assert first.position_id != second.position_id

    def test_should_keep_given_ids(self, eurusd: Instrument) -> None:
        match_id, position_id = uuid4(), uuid4()
        position = Position.create(eurusd, "1.1", 1000, match_id=match_id, position_id=position_id)
        assert position.match_id == match_id
        assert position.position_id == position_id

    def test_should_be_immutable(self, eurusd: Instrument) -> None:
        position = Position.create(eurusd, "1.1", 1000)
        with pytest.raises(AttributeError):
            position.primary = Money(Decimal(1), eurusd.primary)  # type: ignore[misc]

    def test_should_render_readably(self, eurusd: Instrument) -> None:
        position = Position.create(eurusd, Decimal("1.1000"), Decimal(100000))
        assert str(position).startswith("POSITION EUR/USD 100000 EUR @ 1.1")

    def test_should_render_zero_primary_without_price(self, eur: Asset, usd: Asset) -> None:
        position = Position(Money(Decimal(0), eur), Money(Decimal(5), usd))
        rendered = str(position)
        assert rendered.startswith("POSITION EUR/USD")
        assert "/ 5 USD" in rendered
        assert "@" not in rendered

    def test_zero_primary_should_have_zero_price(self, eur: Asset, usd: Asset) -> None:
        """Test a cash-only position derives a zero price and no profit/loss."""
        position = Position(Money(Decimal(0), eur), Money(Decimal(5), usd))
        assert position.price == Decimal(0)
        assert position.amount == Decimal(0)
        assert position.side == PositionSide.SHORT
        assert position.profit_loss(Decimal("1.2")).is_zero


class TestPositionProfitLoss:
    """Profit/loss, close and pip helpers."""

    def test_should_calculate_profit_loss_at_price(self, eurusd: Instrument) -> None:
        """Test profit for long and loss for short on a rising price."""
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(100000))
        short = Position.create(eurusd, Decimal("1.1000"), Decimal(-100000))

        assert long.profit_loss(Decimal("1.1050")) == Money(Decimal(500), eurusd.secondary)
        assert short.profit_loss(Decimal("1.1050")) == Money(Decimal(-500), eurusd.secondary)

    def test_should_use_bid_for_long_and_ask_for_short(self, eurusd: Instrument) -> None:
        """Test quote side selection."""
        quote = Quote(eurusd, bid=Decimal("1.1050"), ask=Decimal("1.1060"))
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(1000))
        short = Position.create(eurusd, Decimal("1.1000"), Decimal(-1000))

        assert long.profit_loss_at(quote) == Money(Decimal(5), eurusd.secondary)
        assert short.profit_loss_at(quote) == Money(Decimal(-6), eurusd.secondary)

    def test_should_return_none_when_side_missing(self, eurusd: Instrument) -> None:
        quote = Quote(eurusd, ask=Decimal("1.1060"))
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(1000))
        assert long.profit_loss_at(quote) is None

    def test_should_convert_profit_loss_into_asset(
        self, eurusd: Instrument, market: StaticMarket, usd: Asset, jpy: Asset
    ) -> None:
        """Test conversion into the quote asset and a third currency."""
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(100000))

        assert long.profit_loss_in(usd, market) == Money(Decimal(500), usd)
        # 500 USD sold at the USD/JPY bid
        assert long.profit_loss_in(jpy, market) == Money(Decimal(75000), jpy)

    def test_should_return_none_without_quote(self, usd: Asset, market: StaticMarket) -> None:
        gbpusd = Instrument(CurrencyAsset("GBP"), usd)
        position = Position.create(gbpusd, Decimal("1.25"), Decimal(1000))
        assert position.profit_loss_in(usd, market) is None
        assert position.close(market) is None
        assert position.profit_loss_pips_at(market) is None

    def test_should_close_at_market(self, eurusd: Instrument, market: StaticMarket) -> None:
        """Test the closing position is opposite-sized at the close side."""
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(100000))
        short = Position.create(eurusd, Decimal("1.1000"), Decimal(-100000))

        long_close = long.close(market)
        short_close = short.close(market)

        assert long_close is not None and short_close is not None
        assert long_close.primary.amount == Decimal(-100000)
        assert long_close.price == Decimal("1.1050")
        assert short_close.primary.amount == Decimal(100000)
        assert short_close.price == Decimal("1.1052")

    def test_should_calculate_profit_loss_in_pips(
        self, eurusd: Instrument, usdjpy: Instrument, market: StaticMarket
    ) -> None:
        """Test pip P/L for USD and JPY quoted pairs."""
        long = Position.create(eurusd, Decimal("1.1000"), Decimal(100000))
        short = Position.create(usdjpy, Decimal("150.00"), Decimal(-1000))

        assert long.profit_loss_pips(Decimal("1.1050")) == Decimal(50)
        assert short.profit_loss_pips(Decimal("149.50")) == Decimal(50)
        assert long.profit_loss_pips_at(market) == Decimal(50)

    def test_should_reject_pips_for_non_currency(self, usd: Asset) -> None:
        gold = Instrument(Asset("GOLD"), usd)
        position = Position.create(gold, Decimal("2000"), Decimal(10))
        with pytest.raises(UnsupportedInstrumentError):
            position.profit_loss_pips(Decimal("2010"))
