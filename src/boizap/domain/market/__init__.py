"""Market domain - quotes and fallback estimates"""

from .quote import Quote, Trend, fallback_quote
from .exceptions import MarketException, QuoteFetchError

__all__ = [
    'Quote',
    'Trend',
    'fallback_quote',
    'MarketException',
    'QuoteFetchError',
]
