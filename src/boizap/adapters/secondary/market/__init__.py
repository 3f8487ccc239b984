"""Market data provider adapters"""
from .http_provider import HttpMarketDataProvider
from .static_provider import StaticMarketDataProvider
from .payload import parse_quote_payload

__all__ = [
    'HttpMarketDataProvider',
    'StaticMarketDataProvider',
    'parse_quote_payload',
]
