import pytest
from unittest.mock import AsyncMock, Mock

from boizap.domain.market.quote import Quote, Trend
from boizap.domain.shared.value_objects import SaleUnit
from boizap.ports.outbound.market_data_provider import IMarketDataProvider


@pytest.fixture(autouse=True)
def isolated_container(tmp_path, monkeypatch):
    """
    Give every test a fresh container and a throwaway user config.

    The quote API settings are cleared so nothing reaches the network.
    """
    from boizap.configuration import config as config_module
    from boizap.configuration.container import reset_container
    from boizap.configuration.settings import settings

    original_url = settings.quote_api_url
    original_token = settings.quote_api_token
    settings.quote_api_url = ""
    settings.quote_api_token = None

    monkeypatch.setattr(config_module, "_config", config_module.Config(tmp_path / "config.json"))
    reset_container()

    yield

    reset_container()
    settings.quote_api_url = original_url
    settings.quote_api_token = original_token


@pytest.fixture
def context():
    """Shared context for BDD steps"""
    return {}


@pytest.fixture
def market_quote():
    """A well-formed provider quote for cattle"""
    return Quote(
        price=312.40,
        unit=SaleUnit.ARROBA,
        source="CEPEA",
        date="2024-05-02",
        trend=Trend.UP,
        commentary="Oferta restrita de boiadas sustenta as cotações.",
    )


@pytest.fixture
def market_provider():
    """
    Mock of the external market data provider.

    This is the only collaborator we mock; configure fetch_quote per test.
    """
    provider = Mock(spec=IMarketDataProvider)
    provider.fetch_quote = AsyncMock()
    return provider


@pytest.fixture
def mediator(market_provider):
    """Container mediator wired to the mocked provider"""
    from boizap.configuration.container import get_mediator, set_market_data_provider

    set_market_data_provider(market_provider)
    return get_mediator()
