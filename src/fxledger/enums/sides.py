"""
Position and offer side enumerations.

This module defines the directional stance of a position and the side of a
quote it trades against, with total mappings between them.
"""

from enum import StrEnum


class OfferSide(StrEnum):
    """
    Side of a two-way quote.

    BID is where the market buys from us, ASK is where it sells to us.
    """

    BID = "bid"
    ASK = "ask"

    def reverse(self) -> "OfferSide":
        """Get the opposite offer side."""
        return OfferSide.ASK if self is OfferSide.BID else OfferSide.BID


class PositionSide(StrEnum):
    """
    Allowed position sides.

    Derived from the sign of a position's primary leg.
    """

    LONG = "long"
    SHORT = "short"

    @property
    def is_long(self) -> bool:
        """Check if side is long."""
        return self is PositionSide.LONG

    @property
    def is_short(self) -> bool:
        """Check if side is short."""
        return self is PositionSide.SHORT

    def open_side(self) -> OfferSide:
        """Offer side a position of this side is opened against."""
        return OfferSide.ASK if self.is_long else OfferSide.BID

    def close_side(self) -> OfferSide:
        """Offer side a position of this side is closed against."""
        return OfferSide.BID if self.is_long else OfferSide.ASK

    def reverse(self) -> "PositionSide":
        """Get the opposite position side."""
        return PositionSide.SHORT if self.is_long else PositionSide.LONG
