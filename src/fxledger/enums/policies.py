"""
Portfolio aggregation policies.
"""

from enum import StrEnum


class PortfolioPolicy(StrEnum):
    """
    Allowed portfolio aggregation policies.

    STRICT keeps at most one net position per instrument. NON_STRICT keeps
    independently tracked positions, matched only by correlation id.
    """

    STRICT = "strict"
    NON_STRICT = "non_strict"

    @classmethod
    def from_string(cls, value: str) -> "PortfolioPolicy":
        """
        Convert string to PortfolioPolicy, with case-insensitive matching.

        Args:
            value: String representation of the policy

        Returns:
            Corresponding PortfolioPolicy value

        Raises:
            ValueError: If policy is not supported
        """
        normalized = value.strip().lower().replace("-", "_")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(
            f"Unsupported portfolio policy: {value}. "
            f"Supported policies: {', '.join([p.value for p in cls])}"
        )
