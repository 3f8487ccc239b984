"""Livestock queries"""
from .resolve_defaults import (
    ResolveDefaultsQuery,
    ResolveDefaultsHandler,
    ListManagementSystemsQuery,
    ListManagementSystemsHandler,
)

__all__ = [
    'ResolveDefaultsQuery',
    'ResolveDefaultsHandler',
    'ListManagementSystemsQuery',
    'ListManagementSystemsHandler',
]
