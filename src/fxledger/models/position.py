"""
Position domain model.

A position is held as two signed legs: ``primary`` in the instrument's base
asset and ``secondary`` in its quote asset, with opposite signs. Everything
else (instrument, price, side, amount) is derived from the legs.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from functools import cached_property
from uuid import UUID, uuid4

from loguru import logger

from fxledger.enums import OfferSide, PositionSide
from fxledger.exceptions.ledger import InvalidPositionError, PartialCloseError
from fxledger.interfaces.market import IMarket
from fxledger.models.asset import Asset, Instrument
from fxledger.models.deal import Deal
from fxledger.models.diff import (
    AddPosition,
    CreateDeal,
    ModifyPosition,
    PortfolioDiff,
    RemovePosition,
)
from fxledger.models.money import Money
from fxledger.models.quote import Quote
from fxledger.types.financial import ZERO, sign, to_decimal
from fxledger.types.pips import as_pips
from fxledger.utils.validation import validate_non_negative, validate_same_instrument


@dataclass(frozen=True)
class Position:
    """Represents an open stake in an instrument.

    ``position_id`` identifies this position in a book. ``match_id`` is an
    optional correlation id naming an existing position this one should be
    netted against.
    """

    primary: Money
    secondary: Money
    match_id: UUID | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    position_id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        """Validate leg signs after initialization."""
        if sign(self.primary.amount) == sign(self.secondary.amount):
            raise InvalidPositionError(self.primary, self.secondary)

    @classmethod
    def create(
        cls,
        instrument: Instrument,
        price: Decimal | str | int | float,
        amount: Decimal | str | int | float,
        match_id: UUID | None = None,
        timestamp: datetime | None = None,
        position_id: UUID | None = None,
    ) -> "Position":
        """Factory method to create a position from a price and a signed amount.

        Args:
            instrument: Traded instrument
            price: Price of one primary unit in the secondary asset
            amount: Signed primary amount, positive for long, negative for short
            match_id: Correlation id of the position to net against
            timestamp: Position time (default now)
            position_id: Book identifier (default fresh uuid)

        Returns:
            New Position instance

        Raises:
            InvalidPositionError: If amount is zero
        """
        price_value = validate_non_negative(to_decimal(price), "price")
        amount_value = to_decimal(amount)
        return cls(
            primary=Money(amount_value, instrument.primary),
            secondary=Money(-amount_value * price_value, instrument.secondary),
            match_id=match_id,
            timestamp=timestamp if timestamp is not None else datetime.now(UTC),
            position_id=position_id if position_id is not None else uuid4(),
        )

    @cached_property
    def instrument(self) -> Instrument:
        return Instrument(self.primary.asset, self.secondary.asset)

    @cached_property
    def price(self) -> Decimal:
        """Absolute secondary per primary unit. Zero when the primary leg is zero."""
        if self.primary.is_zero:
            return ZERO
        return abs(self.secondary.amount / self.primary.amount)

    @cached_property
    def side(self) -> PositionSide:
        return PositionSide.LONG if self.primary.amount > 0 else PositionSide.SHORT

    @cached_property
    def amount(self) -> Decimal:
        return abs(self.primary.amount)

    def profit_loss(self, price: Decimal) -> Money:
        """Profit/loss if the position were closed at ``price``, in the secondary asset."""
        return Money((price - self.price) * self.primary.amount, self.secondary.asset)

    def profit_loss_at(self, quote: Quote) -> Money | None:
        """Profit/loss against the closing side of ``quote``, if quoted."""
        price = quote.price(self.side.close_side())
        if price is None:
            return None
        return self.profit_loss(price)

    def profit_loss_in(self, asset: Asset, market: IMarket) -> Money | None:
        """Profit/loss converted into ``asset``, or None without market data."""
        quote = market.quote(self.instrument, self.amount)
        if quote is None:
            return None
        raw = self.profit_loss_at(quote)
        if raw is None:
            return None
        side = OfferSide.BID if raw.amount >= 0 else OfferSide.ASK
        return market.convert(raw, asset, side, self.amount)

    def close(self, market: IMarket) -> "Position | None":
        """Build the position that would close this one at market."""
        quote = market.quote(self.instrument, self.amount)
        if quote is None:
            return None
        price = quote.price(self.side.close_side())
        if price is None:
            return None
        return Position.create(self.instrument, price, -self.primary.amount)

    def profit_loss_pips(self, price: Decimal) -> Decimal:
        """Profit/loss in pips if closed at ``price``. Currency pairs only."""
        return as_pips(self.instrument, (price - self.price) * sign(self.primary.amount))

    def profit_loss_pips_at(self, market: IMarket) -> Decimal | None:
        quote = market.quote(self.instrument, self.amount)
        if quote is None:
            return None
        price = quote.price(self.side.close_side())
        if price is None:
            return None
        return self.profit_loss_pips(price)

    def merge(self, that: "Position") -> tuple["Position | None", Money]:
        """Net ``that`` into this position.

        Returns the residual position (None when the two cancel out) and the
        money realized on the cancelled slice, in the secondary asset.
        """
        validate_same_instrument(self.instrument, that.instrument)

        # a, b: initial positions
        # c: slice of a that collapses
        # d: slice of b that collapses against c
        # e: realized slice (primary amount always zero)
        # f: resulting position
        # Branch selection and operation order are load-bearing for rounding.
        a1 = self.primary.amount
        a2 = self.secondary.amount
        b1 = that.primary.amount
        b2 = that.secondary.amount
        c1 = (min(abs(a1), abs(b1)) if sign(a1) * sign(b1) == -1 else ZERO) * sign(a1)
        c2 = a2 if a1 == 0 else c1 * (a2 / a1)
        d1 = -c1
        d2 = b2 if b1 == 0 else d1 * (b2 / b1)
        e2 = c2 + d2
        sigma = -1 if abs(a1) > abs(b1) else 1
        f1 = a1 + b1
        if sign(a1) * sign(b1) == 1:
            f2 = a2 + b2
        elif sigma < 0:
            f2 = a2 - c2
        else:
            f2 = b2 - d2

        remaining = None
        if f1 != 0:
            remaining = Position(
                primary=Money(f1, self.primary.asset),
                secondary=Money(f2, self.secondary.asset),
                timestamp=that.timestamp,
            )
        return remaining, Money(e2, self.secondary.asset)

    def diff(self, old_position: "Position | None") -> PortfolioDiff:
        """Derive the actions that apply this incoming position over ``old_position``."""
        if old_position is None:
            result = PortfolioDiff.of(AddPosition(self))
        else:
            remaining, profit_loss = old_position.merge(self)
            if remaining is None:
                deal = Deal(old_position, self.price, self.timestamp, profit_loss)
                result = PortfolioDiff.of(RemovePosition(old_position), CreateDeal(deal))
            elif old_position.primary.is_zero or self.primary.is_zero:
                # A zero primary leg nets as cash and is realized whole
                cash = old_position if old_position.primary.is_zero else self
                deal = Deal(cash, self.price, self.timestamp, profit_loss)
                result = PortfolioDiff.of(ModifyPosition(old_position, remaining), CreateDeal(deal))
            elif old_position.side == self.side:
                result = PortfolioDiff.of(ModifyPosition(old_position, remaining))
            else:
                deal = self._partial_close_deal(old_position)
                result = PortfolioDiff.of(ModifyPosition(old_position, remaining), CreateDeal(deal))

        logger.debug(f"Derived diff for {self}: {result.kinds}")
        return result

    def _partial_close_deal(self, old_position: "Position") -> Deal:
        validate_same_instrument(old_position.instrument, self.instrument)
        if old_position.side == self.side:
            raise PartialCloseError(f"Partial close needs opposite sides, both are {self.side}")
        if old_position.amount == self.amount:
            raise PartialCloseError(
                f"Partial close needs unequal amounts, both are {self.amount}"
            )

        closing_amount = min(old_position.amount, self.amount) * sign(old_position.primary.amount)
        closing_part = Position.create(
            old_position.instrument,
            old_position.price,
            closing_amount,
            match_id=old_position.match_id,
            timestamp=old_position.timestamp,
            position_id=old_position.position_id,
        )
        _, profit_loss = closing_part.merge(self)
        return Deal(closing_part, self.price, self.timestamp, profit_loss)

    def __str__(self) -> str:
        # No price exists for a zero primary leg
        if self.primary.is_zero:
            return f"POSITION {self.instrument} {self.primary} / {self.secondary}"
        return f"POSITION {self.instrument} {self.primary} @ {self.price}"
