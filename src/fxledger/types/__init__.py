"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import ZERO, set_scale, sign, to_decimal

__all__ = [
    # Utility functions
    "to_decimal",
    "sign",
    "set_scale",
    # Constants
    "ZERO",
]
