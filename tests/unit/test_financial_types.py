"""
Unit tests for financial number helpers and pip scaling.
"""

from decimal import ROUND_DOWN, Decimal

import pytest

from fxledger.exceptions.ledger import UnsupportedInstrumentError, ValidationError
from fxledger.models.asset import Asset, CurrencyAsset, Instrument
from fxledger.types import ZERO, set_scale, sign, to_decimal
from fxledger.types.pips import as_pips, from_pips, pip_scale


class TestToDecimal:
    """Tests for to_decimal conversion."""

    def test_should_convert_float_through_string(self) -> None:
        """Test floats keep their shortest repr."""
        assert to_decimal(1.1) == Decimal("1.1")
        assert str(to_decimal(0.1)) == "0.1"

    def test_should_pass_through_decimal_and_convert_ints(self) -> None:
        """Test Decimal passthrough and int conversion."""
        value = Decimal("2.50")
        assert to_decimal(value) is value
        assert to_decimal(50000) == Decimal(50000)
        assert to_decimal("1.1050") == Decimal("1.1050")

    def test_should_reject_non_numbers(self) -> None:
        """Test invalid and non-finite input."""
        with pytest.raises(ValidationError, match="Not a number"):
            to_decimal("abc")
        with pytest.raises(ValidationError, match="finite"):
            to_decimal(float("inf"))
        with pytest.raises(ValidationError, match="finite"):
            to_decimal("NaN")


class TestSign:
    """Tests for sign helper."""

    def test_should_return_sign(self) -> None:
        assert sign(Decimal("-3.5")) == -1
        assert sign(ZERO) == 0
        assert sign(Decimal("-0")) == 0
        assert sign(Decimal("0.0001")) == 1


class TestSetScale:
    """Tests for set_scale rounding."""

    def test_should_round_half_up_by_default(self) -> None:
        assert set_scale(Decimal("1.005"), 2) == Decimal("1.01")
        assert str(set_scale(Decimal("500"), 2)) == "500.00"

    def test_should_honour_rounding_mode(self) -> None:
        assert set_scale(Decimal("1.009"), 2, ROUND_DOWN) == Decimal("1.00")

    def test_should_reject_negative_scale(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            set_scale(Decimal("1"), -1)


class TestPips:
    """Tests for pip scaling."""

    def test_should_use_four_places_for_usd_quoted_pairs(self, eurusd: Instrument) -> None:
        assert pip_scale(eurusd) == 4
        assert as_pips(eurusd, Decimal("0.0050")) == Decimal(50)
        assert from_pips(eurusd, Decimal(50)) == Decimal("0.0050")

    def test_should_use_two_places_for_jpy_quoted_pairs(self, usdjpy: Instrument) -> None:
        assert pip_scale(usdjpy) == 2
        assert as_pips(usdjpy, Decimal("0.50")) == Decimal(50)

    def test_should_reject_non_currency_instruments(self) -> None:
        gold = Instrument(Asset("GOLD"), CurrencyAsset("USD"))
        with pytest.raises(UnsupportedInstrumentError):
            pip_scale(gold)
