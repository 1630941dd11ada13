"""
In-memory market backed by a fixed set of quotes.

Conversion between two assets tries, in order: the direct pair, the
reversed pair, and two hops through the pivot asset. Resolved routes are
memoized per asset pair. The quote set never changes after construction,
so cached routes cannot go stale.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType

from cachetools import LRUCache, cachedmethod
from loguru import logger

from fxledger.constants import DEFAULT_PIVOT_ASSET, MARKET_ROUTE_CACHE_SIZE
from fxledger.enums import OfferSide
from fxledger.interfaces.market import IMarket
from fxledger.models.asset import Asset, Instrument, asset_of
from fxledger.models.money import Money
from fxledger.models.quote import Quote

# (instrument to quote, whether the conversion runs against the quote direction)
RouteStep = tuple[Instrument, bool]


class StaticMarket(IMarket):
    """Snapshot market over a fixed quote table."""

    def __init__(
        self,
        quotes: Iterable[Quote] = (),
        pivot: Asset | None = None,
        cache_size: int = MARKET_ROUTE_CACHE_SIZE,
    ) -> None:
        self._quotes: Mapping[Instrument, Quote] = MappingProxyType(
            {quote.instrument: quote for quote in quotes}
        )
        self._pivot = pivot if pivot is not None else asset_of(DEFAULT_PIVOT_ASSET)
        self._route_cache: LRUCache = LRUCache(maxsize=cache_size)

    @property
    def pivot(self) -> Asset:
        return self._pivot

    @property
    def quotes(self) -> Mapping[Instrument, Quote]:
        return self._quotes

    def with_quote(self, quote: Quote) -> "StaticMarket":
        """New market with ``quote`` added or replacing the existing one."""
        merged = {**self._quotes, quote.instrument: quote}
        return StaticMarket(merged.values(), self._pivot, self._route_cache.maxsize)

    def quote(self, instrument: Instrument, amount: Decimal) -> Quote | None:
        quote = self._quotes.get(instrument)
        if quote is None or not quote.covers(amount):
            return None
        return quote

    def convert(
        self, money: Money, asset: Asset, side: OfferSide, amount: Decimal
    ) -> Money | None:
        if money.asset == asset:
            return money

        route = self._route(money.asset, asset)
        if route is None:
            logger.debug(f"No conversion route from {money.asset} to {asset}")
            return None

        value = money.amount
        for instrument, inverted in route:
            quote = self.quote(instrument, amount)
            if quote is None:
                return None
            price = quote.price(side.reverse() if inverted else side)
            if price is None or price == 0:
                return None
            value = value / price if inverted else value * price
        return Money(value, asset)

    @cachedmethod(lambda self: self._route_cache)
    def _route(self, source: Asset, target: Asset) -> tuple[RouteStep, ...] | None:
        direct = self._hop(source, target)
        if direct is not None:
            return (direct,)
        if self._pivot in (source, target):
            return None
        first = self._hop(source, self._pivot)
        second = self._hop(self._pivot, target)
        if first is None or second is None:
            return None
        return (first, second)

    def _hop(self, source: Asset, target: Asset) -> RouteStep | None:
        instrument = Instrument(source, target)
        if instrument in self._quotes:
            return (instrument, False)
        if instrument.reverse in self._quotes:
            return (instrument.reverse, True)
        return None
