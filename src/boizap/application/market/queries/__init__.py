"""Market queries"""
from .resolve_quote import ResolveQuoteQuery, ResolveQuoteHandler

__all__ = ['ResolveQuoteQuery', 'ResolveQuoteHandler']
