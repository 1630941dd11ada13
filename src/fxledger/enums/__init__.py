"""
Core enumerations for the ledger.

This module provides centralized enumerations for domain concepts
like position sides, quote sides and portfolio policies.
"""

from .policies import PortfolioPolicy
from .sides import OfferSide, PositionSide

__all__ = ["OfferSide", "PositionSide", "PortfolioPolicy"]
