"""Offline market data provider"""
import logging
from typing import Dict, Optional, Tuple

from ....domain.livestock.species import Species
from ....domain.market.exceptions import QuoteFetchError
from ....domain.market.quote import Quote
from ....domain.shared.value_objects import Region
from ....ports.outbound.market_data_provider import IMarketDataProvider

logger = logging.getLogger(__name__)


class StaticMarketDataProvider(IMarketDataProvider):
    """
    Provider answering from an in-memory table of quotes.

    Lookup order: (species, region), then (species, None) as species-wide
    quote. With no match the fetch fails, which drives callers onto the
    fallback estimate. Used when no quote API is configured.
    """

    def __init__(self, quotes: Optional[Dict[Tuple[Species, Optional[Region]], Quote]] = None):
        self._quotes = dict(quotes or {})

    def set_quote(self, species: Species, quote: Quote, region: Optional[Region] = None) -> None:
        self._quotes[(species, region)] = quote

    async def fetch_quote(self, species: Species, region: Region) -> Quote:
        quote = self._quotes.get((species, region)) or self._quotes.get((species, None))
        if quote is None:
            logger.debug(f"No static quote for {species.code}/{region}")
            raise QuoteFetchError(f"No quote available for {species.label} in {region}")
        return quote
