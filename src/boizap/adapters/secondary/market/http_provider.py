import asyncio
import logging
from typing import Dict, Optional

import requests

from ....domain.livestock.species import Species
from ....domain.market.exceptions import QuoteFetchError
from ....domain.market.quote import Quote
from ....domain.shared.value_objects import Region
from ....ports.outbound.market_data_provider import IMarketDataProvider
from .payload import parse_quote_payload

logger = logging.getLogger(__name__)


class HttpMarketDataProvider(IMarketDataProvider):
    """
    Market quote provider backed by a JSON HTTP API

    GET {base_url}/quotes?species=<code>&region=<UF>
    One attempt per fetch, no retry. Every transport, status or payload
    problem surfaces as QuoteFetchError.
    """

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    def _request(self, params: Dict[str, str]) -> Quote:
        url = f"{self._base_url}/quotes"
        logger.debug(f"GET {url} {params}")

        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            raise QuoteFetchError(f"Quote request failed: {e}") from e

        if not response.ok:
            logger.error(f"Quote API error {response.status_code}: {response.text}")
            raise QuoteFetchError(f"Quote API returned HTTP {response.status_code}")

        return parse_quote_payload(response.content)

    async def fetch_quote(self, species: Species, region: Region) -> Quote:
        return await asyncio.to_thread(
            self._request, {"species": species.code, "region": region.value}
        )
