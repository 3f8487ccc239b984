"""Resolve market quote query"""
import logging
from dataclasses import dataclass
from typing import Optional

from ....mediator import Request, RequestHandler
from ....domain.livestock.species import Species
from ....domain.market.quote import Quote, fallback_quote
from ....domain.shared.value_objects import Region
from ....ports.outbound.market_data_provider import IMarketDataProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveQuoteQuery(Request[Quote]):
    """Query for the quote a valuation should be priced with"""
    species: Species
    region: Region
    manual_price_override: Optional[float] = None


class ResolveQuoteHandler(RequestHandler[ResolveQuoteQuery, Quote]):
    """
    Handler for ResolveQuoteQuery

    Policy:
    1. Always ask the provider first, even under manual pricing, so the
       quote keeps the provider's date, trend and commentary
    2. Any provider failure is replaced by the fallback estimate; nothing
       propagates past this handler
    3. A manual override replaces price and source of whichever quote
       resulted, marking it manual
    """

    def __init__(self, market_data_provider: IMarketDataProvider):
        """
        Initialize handler.

        Args:
            market_data_provider: External quote lookup
        """
        self._provider = market_data_provider

    async def handle(self, request: ResolveQuoteQuery) -> Quote:
        """
        Resolve the quote for a species/region.

        Args:
            request: Query with species, region and optional manual price

        Returns:
            Quote - never raises for provider failures
        """
        try:
            quote = await self._provider.fetch_quote(request.species, request.region)
        except Exception as e:
            logger.warning(
                f"Market data unavailable for {request.species.code}/{request.region}, "
                f"using fallback estimate: {e}"
            )
            quote = fallback_quote(request.species)

        if request.manual_price_override is not None:
            logger.info(f"Applying manual price {request.manual_price_override} over {quote.source} quote")
            quote = quote.with_manual_price(request.manual_price_override)

        return quote
