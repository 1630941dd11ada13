"""
Core type definitions and protocols.

This module defines shared types and protocols to prevent circular dependencies
between domain models while maintaining type safety.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from fxledger.enums import PositionSide
from fxledger.models.asset import Instrument
from fxledger.models.money import Money


class IPosition(Protocol):
    """Protocol defining the interface for Position objects.

    Deals and portfolio actions refer to positions through this protocol,
    which breaks the cycle between Position and the diff types it produces.
    """

    primary: Money
    secondary: Money
    match_id: UUID | None
    timestamp: datetime
    position_id: UUID

    @property
    def instrument(self) -> Instrument: ...

    @property
    def price(self) -> Decimal: ...

    @property
    def side(self) -> PositionSide: ...

    @property
    def amount(self) -> Decimal: ...
