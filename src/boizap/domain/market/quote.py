"""Market quote value objects"""
from dataclasses import dataclass, replace
from datetime import date as Date
from enum import Enum
from typing import Optional

from ..livestock.species import Species
from ..shared.value_objects import SaleUnit

FALLBACK_PRICE = 285.50
FALLBACK_SOURCE = "Market Estimate"
FALLBACK_COMMENTARY = (
    "Real-time market data was unavailable. Showing estimated average values."
)
MANUAL_SOURCE = "Manual"


class Trend(Enum):
    """Short-term market direction"""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class Quote:
    """
    Quote value object

    Price for one sale unit of a species' output, with provenance metadata.
    Either the provider's answer, a manual-price copy of it, or the fallback
    estimate; never partially updated.
    """
    price: float
    unit: SaleUnit
    source: str          # Provenance label (e.g. "CEPEA", "Manual")
    date: str            # Quote date label
    trend: Trend
    commentary: str
    is_manual: bool = False

    def with_manual_price(self, price: float) -> 'Quote':
        """Copy of this quote priced manually; other fields are preserved"""
        return replace(self, price=price, source=MANUAL_SOURCE, is_manual=True)


def fallback_quote(species: Species, today: Optional[Date] = None) -> Quote:
    """Estimate used when the market data provider cannot answer"""
    today = today or Date.today()
    return Quote(
        price=FALLBACK_PRICE,
        unit=SaleUnit.KILOGRAM if species in (Species.SWINE, Species.POULTRY) else SaleUnit.ARROBA,
        source=FALLBACK_SOURCE,
        date=today.isoformat(),
        trend=Trend.STABLE,
        commentary=FALLBACK_COMMENTARY,
    )
