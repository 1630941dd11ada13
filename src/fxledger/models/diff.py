"""
Portfolio actions and diffs.

A diff is the ordered list of actions describing one ledger transition.
Actions form a closed union; consumers match on it exhaustively.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from fxledger.models.deal import Deal
from fxledger.protocols import IPosition


@dataclass(frozen=True)
class AddPosition:
    """Open a new position."""

    position: IPosition

    @property
    def applied_position(self) -> IPosition:
        return self.position


@dataclass(frozen=True)
class RemovePosition:
    """Close an existing position entirely."""

    position: IPosition

    @property
    def applied_position(self) -> IPosition:
        return self.position


@dataclass(frozen=True)
class ModifyPosition:
    """Replace an existing position with its netted successor."""

    old_position: IPosition
    new_position: IPosition

    @property
    def applied_position(self) -> IPosition:
        return self.new_position


@dataclass(frozen=True)
class CreateDeal:
    """Record a realized deal. Has no effect on portfolio state."""

    deal: Deal

    @property
    def applied_position(self) -> IPosition:
        return self.deal.position


PortfolioAction = AddPosition | RemovePosition | ModifyPosition | CreateDeal


@dataclass(frozen=True)
class PortfolioDiff:
    """Ordered actions of a single ledger transition."""

    actions: tuple[PortfolioAction, ...]

    @classmethod
    def of(cls, *actions: PortfolioAction) -> "PortfolioDiff":
        return cls(tuple(actions))

    def __iter__(self) -> Iterator[PortfolioAction]:
        return iter(self.actions)

    def __len__(self) -> int:
        return len(self.actions)

    @property
    def deals(self) -> list[Deal]:
        """Deals created by this transition, in order."""
        return [action.deal for action in self.actions if isinstance(action, CreateDeal)]

    def first_deal(self) -> Deal | None:
        deals = self.deals
        return deals[0] if deals else None

    @property
    def kinds(self) -> list[str]:
        """Action class names, in order. Handy for logging."""
        return [type(action).__name__ for action in self.actions]
