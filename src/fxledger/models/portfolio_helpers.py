"""Slot invariants shared by the portfolio implementations."""

from collections.abc import Mapping
from typing import Any

from fxledger.exceptions.ledger import PositionNotFoundError, SlotOccupiedError
from fxledger.models.asset import Instrument


class PortfolioValidator:
    """Centralized invariant checks for applying portfolio actions.

    Every failure here is a defect in the caller's state management and
    raises an InvariantViolationError subclass.
    """

    @staticmethod
    def validate_slot_free(
        slots: Mapping[Any, Any], key: Any, instrument: Instrument, label: Any = None
    ) -> None:
        """Validate that nothing is stored under ``key``.

        Raises:
            SlotOccupiedError: If the slot is taken
        """
        if key in slots:
            raise SlotOccupiedError(instrument, label)

    @staticmethod
    def validate_slot_taken(
        slots: Mapping[Any, Any], key: Any, instrument: Instrument, label: Any = None
    ) -> None:
        """Validate that a position is stored under ``key``.

        Raises:
            PositionNotFoundError: If the slot is empty
        """
        if key not in slots:
            raise PositionNotFoundError(instrument, label)
