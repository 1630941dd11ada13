"""
Core constants and defaults.

Defines system-wide defaults for settlement, rounding and pip arithmetic.
"""

from decimal import ROUND_HALF_UP

# Settlement defaults
DEFAULT_SETTLEMENT_ASSET = "USD"  # Account balance currency
DEFAULT_PIVOT_ASSET = "USD"  # Cross-conversion pivot for markets
DEFAULT_BALANCE_SCALE = 2  # Decimal places kept on account balances
DEFAULT_ROUNDING = ROUND_HALF_UP

# Scale limits
MIN_BALANCE_SCALE = 0
MAX_BALANCE_SCALE = 18

# Pip arithmetic (currency pairs only)
DEFAULT_PIP_SCALE = 4  # 1 pip = 0.0001
JPY_PIP_SCALE = 2  # 1 pip = 0.01 for JPY-quoted pairs
JPY_CODE = "JPY"

# Market route cache
MARKET_ROUTE_CACHE_SIZE = 256
