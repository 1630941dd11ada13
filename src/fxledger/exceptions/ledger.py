"""
Custom exception hierarchy for the ledger.

This module defines domain-specific exceptions for better error handling.
Invariant violations signal defects in the caller's state management and
are never absorbed by the core. Missing market data is not an error and is
reported as ``None`` by the operations that depend on it.
"""

from typing import Any


class LedgerException(Exception):
    """Base exception for all ledger-related errors."""

    pass


class ValidationError(LedgerException):
    """Raised when input validation fails."""

    pass


class ConfigurationError(LedgerException):
    """Raised when configuration is invalid."""

    pass


class UnsupportedInstrumentError(LedgerException):
    """Raised when an operation is not defined for an instrument kind."""

    def __init__(self, instrument: Any, operation: str):
        self.instrument = instrument
        self.operation = operation
        super().__init__(f"{operation} is defined only on currency pairs, got {instrument}")


class InvariantViolationError(LedgerException):
    """Raised when a ledger invariant is broken."""

    pass


class InvalidPositionError(InvariantViolationError):
    """Raised when both legs of a position carry the same sign."""

    def __init__(self, primary: Any, secondary: Any):
        self.primary = primary
        self.secondary = secondary
        super().__init__(
            f"Position legs must have opposite signs: primary={primary}, secondary={secondary}"
        )


class InstrumentMismatchError(InvariantViolationError):
    """Raised when two positions on different instruments are combined."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Instrument mismatch: expected {expected}, got {actual}")


class SlotOccupiedError(InvariantViolationError):
    """Raised when adding a position to a slot that already holds one."""

    def __init__(self, instrument: Any, key: Any = None):
        self.instrument = instrument
        self.key = key
        suffix = f" under key {key}" if key is not None else ""
        super().__init__(f"Position already exists for instrument: {instrument}{suffix}")


class PositionNotFoundError(InvariantViolationError):
    """Raised when trying to operate on a non-existent position."""

    def __init__(self, instrument: Any, key: Any = None):
        self.instrument = instrument
        self.key = key
        suffix = f" under key {key}" if key is not None else ""
        super().__init__(f"Position not found for instrument: {instrument}{suffix}")


class PartialCloseError(InvariantViolationError):
    """Raised when a partial close is derived from positions that cannot produce one."""

    pass
