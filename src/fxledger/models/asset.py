"""
Asset and instrument identity.

Immutable value types: equal codes mean equal assets, equal legs mean equal
instruments.
"""

from dataclasses import dataclass

from fxledger.exceptions.ledger import ValidationError


@dataclass(frozen=True)
class Asset:
    """Anything a monetary amount can be denominated in."""

    code: str

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValidationError("Asset code must be non-empty")

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class CurrencyAsset(Asset):
    """An ISO currency."""

    @classmethod
    def is_currency_code(cls, code: str) -> bool:
        """Check if ``code`` looks like a three-letter currency code."""
        return len(code) == 3 and code.isalpha() and code.isupper()


def asset_of(code: str) -> Asset:
    """Build a currency asset for ISO-looking codes, a plain asset otherwise."""
    code = code.strip()
    if CurrencyAsset.is_currency_code(code):
        return CurrencyAsset(code)
    return Asset(code)


@dataclass(frozen=True)
class Instrument:
    """A tradable pair of assets, quoted as primary/secondary."""

    primary: Asset
    secondary: Asset

    @property
    def is_currency_pair(self) -> bool:
        """Check if both legs are currencies."""
        return isinstance(self.primary, CurrencyAsset) and isinstance(
            self.secondary, CurrencyAsset
        )

    @property
    def reverse(self) -> "Instrument":
        """The same pair quoted the other way round."""
        return Instrument(self.secondary, self.primary)

    @property
    def code(self) -> str:
        return f"{self.primary.code}/{self.secondary.code}"

    @classmethod
    def parse(cls, value: str) -> "Instrument":
        """
        Parse an instrument from its ``PRIMARY/SECONDARY`` code.

        Args:
            value: Instrument code, e.g. "EUR/USD"

        Returns:
            Parsed Instrument

        Raises:
            ValidationError: If the code is malformed
        """
        parts = value.split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise ValidationError(f"Instrument code must look like 'EUR/USD', got {value!r}")
        return cls(asset_of(parts[0]), asset_of(parts[1]))

    def __str__(self) -> str:
        return self.code
