"""Pip scaling for currency pairs."""

from decimal import Decimal

from fxledger.constants import DEFAULT_PIP_SCALE, JPY_CODE, JPY_PIP_SCALE
from fxledger.exceptions.ledger import UnsupportedInstrumentError
from fxledger.models.asset import Instrument


def pip_scale(instrument: Instrument) -> int:
    """Number of decimal places in one pip of ``instrument``."""
    if not instrument.is_currency_pair:
        raise UnsupportedInstrumentError(instrument, "Pip scaling")
    return JPY_PIP_SCALE if instrument.secondary.code == JPY_CODE else DEFAULT_PIP_SCALE


def as_pips(instrument: Instrument, value: Decimal) -> Decimal:
    """Express a price difference in pips."""
    return value.scaleb(pip_scale(instrument))


def from_pips(instrument: Instrument, pips: Decimal) -> Decimal:
    """Express a pip count as a price difference."""
    return pips.scaleb(-pip_scale(instrument))
