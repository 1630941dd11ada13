"""
Market data implementations.
"""

from .static_market import StaticMarket

__all__ = ["StaticMarket"]
