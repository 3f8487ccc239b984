"""Market data provider port interface"""
from abc import ABC, abstractmethod

from ...domain.livestock.species import Species
from ...domain.market.quote import Quote
from ...domain.shared.value_objects import Region


class IMarketDataProvider(ABC):
    """Port for the external market quote lookup"""

    @abstractmethod
    async def fetch_quote(self, species: Species, region: Region) -> Quote:
        """
        Fetch the current quote for a species in a region.

        Args:
            species: Livestock species
            region: Brazilian state used as market reference

        Returns:
            Fully-formed Quote value object

        Raises:
            QuoteFetchError: If the provider fails or answers with a
                malformed payload
        """
        pass
