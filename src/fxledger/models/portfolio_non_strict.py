"""
Non-strict portfolio: independently tracked positions per instrument.

Positions are keyed by instrument and then by their own ``position_id``.
An incoming position is netted only against the position its ``match_id``
names. Positions without a ``match_id`` always open a new entry, which is
what allows hedged books.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import assert_never
from uuid import UUID

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


def _freeze(details: Mapping[Instrument, Mapping[UUID, Position]]) -> Mapping:
    # Empty instrument buckets are dropped so every key holds a position
    return MappingProxyType(
        {
            instrument: MappingProxyType(dict(by_id))
            for instrument, by_id in details.items()
            if by_id
        }
    )


class NonStrictPortfolio(Portfolio):
    """Book keyed by (instrument, position id)."""

    def __init__(
        self, details: Mapping[Instrument, Mapping[UUID, Position]] | None = None
    ) -> None:
        self._details: Mapping[Instrument, Mapping[UUID, Position]] = _freeze(details or {})

    @property
    def details(self) -> Mapping[Instrument, Mapping[UUID, Position]]:
        """Read-only view of the instrument -> (id -> position) mapping."""
        return self._details

    def apply(self, diff: PortfolioDiff) -> "NonStrictPortfolio":
        working = {instrument: dict(by_id) for instrument, by_id in self._details.items()}
        for action in diff:
            match action:
                case AddPosition(position=position):
                    bucket = working.setdefault(position.instrument, {})
                    PortfolioValidator.validate_slot_free(
                        bucket, position.position_id, position.instrument, position.position_id
                    )
                    bucket[position.position_id] = position  # type: ignore[assignment]
                case ModifyPosition(old_position=old, new_position=new):
                    bucket = working.setdefault(old.instrument, {})
                    PortfolioValidator.validate_slot_taken(
                        bucket, old.position_id, old.instrument, old.position_id
                    )
                    PortfolioValidator.validate_slot_free(
                        bucket, new.position_id, old.instrument, new.position_id
                    )
                    del bucket[old.position_id]
                    target = working.setdefault(new.instrument, {})
                    target[new.position_id] = new  # type: ignore[assignment]
                case RemovePosition(position=position):
                    bucket = working.setdefault(position.instrument, {})
                    PortfolioValidator.validate_slot_taken(
                        bucket, position.position_id, position.instrument, position.position_id
                    )
                    del bucket[position.position_id]
                case CreateDeal():
                    pass
                case _:
                    assert_never(action)

        logger.debug(f"Applied {diff.kinds} to non-strict portfolio")
        return NonStrictPortfolio(working)

    def ingest(self, position: Position) -> tuple["NonStrictPortfolio", PortfolioDiff]:
        diff = position.diff(self.matching(position))
        return self.apply(diff), diff

    def matching(self, position: Position) -> Position | None:
        """The open position ``position`` correlates with, if any."""
        if position.match_id is None:
            return None
        return self._details.get(position.instrument, {}).get(position.match_id)

    def get(self, instrument: Instrument, position_id: UUID) -> Position | None:
        return self._details.get(instrument, {}).get(position_id)

    def positions(self) -> list[Position]:
        return [p for by_id in self._details.values() for p in by_id.values()]

    def positions_for(self, instrument: Instrument) -> list[Position]:
        return list(self._details.get(instrument, {}).values())

    def __contains__(self, instrument: object) -> bool:
        return instrument in self._details
