"""Market domain exceptions"""
from ..shared.exceptions import DomainException


class MarketException(DomainException):
    """Base exception for market data operations"""
    pass


class QuoteFetchError(MarketException):
    """Raised when a quote cannot be retrieved or its payload is malformed"""
    pass
