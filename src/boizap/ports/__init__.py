"""Port interfaces for dependency inversion"""
from .outbound.market_data_provider import IMarketDataProvider

__all__ = ['IMarketDataProvider']
