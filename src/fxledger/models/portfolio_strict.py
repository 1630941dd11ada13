"""
Strict portfolio: at most one net position per instrument.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import assert_never

from loguru import logger

from fxledger.models.asset import Instrument
from fxledger.models.diff import (
    AddPosition,
    CreateDeal,
    ModifyPosition,
    PortfolioDiff,
    RemovePosition,
)
from fxledger.models.portfolio import Portfolio
from fxledger.models.portfolio_helpers import PortfolioValidator
from fxledger.models.position import Position


class StrictPortfolio(Portfolio):
    """Book keyed by instrument, one net position per slot.

    Every incoming position is netted against whatever is already held on
    its instrument.
    """

    def __init__(self, positions: Mapping[Instrument, Position] | None = None) -> None:
        self._positions: Mapping[Instrument, Position] = MappingProxyType(dict(positions or {}))

    @property
    def by_instrument(self) -> Mapping[Instrument, Position]:
        """Read-only view of the instrument -> position mapping."""
        return self._positions

    def apply(self, diff: PortfolioDiff) -> "StrictPortfolio":
        working = dict(self._positions)
        for action in diff:
            match action:
                case AddPosition(position=position):
                    PortfolioValidator.validate_slot_free(
                        working, position.instrument, position.instrument
                    )
                    working[position.instrument] = position  # type: ignore[assignment]
                case ModifyPosition(old_position=old, new_position=new):
                    PortfolioValidator.validate_slot_taken(working, old.instrument, old.instrument)
                    working[old.instrument] = new  # type: ignore[assignment]
                case RemovePosition(position=position):
                    PortfolioValidator.validate_slot_taken(
                        working, position.instrument, position.instrument
                    )
                    del working[position.instrument]
                case CreateDeal():
                    pass
                case _:
                    assert_never(action)

        logger.debug(f"Applied {diff.kinds} to strict portfolio ({len(working)} positions)")
        return StrictPortfolio(working)

    def ingest(self, position: Position) -> tuple["StrictPortfolio", PortfolioDiff]:
        diff = position.diff(self.position(position.instrument))
        return self.apply(diff), diff

    def position(self, instrument: Instrument) -> Position | None:
        """The net position on ``instrument``, if any."""
        return self._positions.get(instrument)

    def positions(self) -> list[Position]:
        return list(self._positions.values())

    def positions_for(self, instrument: Instrument) -> list[Position]:
        position = self.position(instrument)
        return [position] if position is not None else []

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, instrument: object) -> bool:
        return instrument in self._positions
