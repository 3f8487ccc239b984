"""
Wiring for the BoiZap application layer.

Builds process-wide instances of:
- the market data provider port
- the mediator, with every query and command handler
- the logging and validation pipeline behaviors
"""
import logging
from typing import Optional

from ..mediator import Mediator
from ..adapters.secondary.market.http_provider import HttpMarketDataProvider
from ..adapters.secondary.market.static_provider import StaticMarketDataProvider
from ..application.livestock.queries.resolve_defaults import (
    ResolveDefaultsQuery,
    ResolveDefaultsHandler,
    ListManagementSystemsQuery,
    ListManagementSystemsHandler,
)
from ..application.market.queries.resolve_quote import (
    ResolveQuoteQuery,
    ResolveQuoteHandler
)
from ..application.valuation.commands.run_valuation import (
    RunValuationCommand,
    RunValuationHandler
)
from ..application.common.behaviors import (
    LoggingBehavior,
    ValidationBehavior
)
from ..ports.outbound.market_data_provider import IMarketDataProvider
from .settings import settings

logger = logging.getLogger(__name__)

# Process-wide instances, rebuilt after reset_container()
_market_data_provider: Optional[IMarketDataProvider] = None
_mediator: Optional[Mediator] = None


def get_market_data_provider() -> IMarketDataProvider:
    """
    Get or create the market data provider.

    HTTP provider when a quote API URL is configured, otherwise an empty
    static provider (every lookup falls back to the estimate).
    """
    global _market_data_provider
    if _market_data_provider is None:
        if settings.quote_api_url:
            _market_data_provider = HttpMarketDataProvider(
                settings.quote_api_url,
                token=settings.quote_api_token,
                timeout=settings.quote_timeout,
            )
        else:
            logger.debug("No quote API configured, using static market data provider")
            _market_data_provider = StaticMarketDataProvider()
    return _market_data_provider


def set_market_data_provider(provider: IMarketDataProvider) -> None:
    """Override the market data provider (drops the cached mediator)"""
    global _market_data_provider, _mediator
    _market_data_provider = provider
    _mediator = None


def get_mediator() -> Mediator:
    """
    Build the mediator on first use.

    Returns:
        Mediator: The shared mediator
    """
    global _mediator
    if _mediator is None:
        mediator = Mediator()

        mediator.register_behavior(LoggingBehavior())
        mediator.register_behavior(ValidationBehavior())

        mediator.register_handler(
            ResolveDefaultsQuery,
            lambda: ResolveDefaultsHandler()
        )
        mediator.register_handler(
            ListManagementSystemsQuery,
            lambda: ListManagementSystemsHandler()
        )
        mediator.register_handler(
            ResolveQuoteQuery,
            lambda: ResolveQuoteHandler(get_market_data_provider())
        )
        mediator.register_handler(
            RunValuationCommand,
            lambda: RunValuationHandler(mediator)
        )

        _mediator = mediator
    return _mediator


def reset_container():
    """Forget the cached provider and mediator"""
    global _market_data_provider, _mediator
    _market_data_provider = None
    _mediator = None
