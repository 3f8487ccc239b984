"""
Quote payload parsing shared by market data providers.

Expected shape (optionally wrapped in a {"data": ...} envelope):

    {"price": 312.4, "unit": "@", "source": "CEPEA", "date": "2024-05-02",
     "trend": "up", "commentary": "..."}

Any missing or malformed field fails the whole payload.
"""
import json
import math
from typing import Any, Dict, Union

from ....domain.market.exceptions import QuoteFetchError
from ....domain.market.quote import Quote, Trend
from ....domain.shared.value_objects import SaleUnit

REQUIRED_FIELDS = ('price', 'unit', 'source', 'date', 'trend', 'commentary')


def _require_text(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise QuoteFetchError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def parse_quote_payload(payload: Union[str, bytes, Dict[str, Any]]) -> Quote:
    """
    Build a Quote from a provider payload.

    Args:
        payload: Decoded JSON object or raw JSON text

    Returns:
        Quote value object (never manual)

    Raises:
        QuoteFetchError: If the payload is not valid JSON or any field is
            missing or malformed
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise QuoteFetchError(f"Quote payload is not valid JSON: {e}") from e

    if isinstance(payload, dict) and isinstance(payload.get('data'), dict):
        payload = payload['data']

    if not isinstance(payload, dict):
        raise QuoteFetchError(f"Quote payload must be an object, got {type(payload).__name__}")

    missing = [key for key in REQUIRED_FIELDS if key not in payload]
    if missing:
        raise QuoteFetchError(f"Quote payload missing fields: {', '.join(missing)}")

    price = payload['price']
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise QuoteFetchError(f"Field 'price' must be a number, got {price!r}")
    if not math.isfinite(price) or price <= 0:
        raise QuoteFetchError(f"Field 'price' must be a positive finite number, got {price}")

    try:
        unit = SaleUnit.from_symbol(_require_text(payload, 'unit'))
    except ValueError as e:
        raise QuoteFetchError(str(e)) from e

    try:
        trend = Trend(_require_text(payload, 'trend').strip().lower())
    except ValueError as e:
        raise QuoteFetchError(f"Unknown trend: {payload['trend']!r}") from e

    return Quote(
        price=float(price),
        unit=unit,
        source=_require_text(payload, 'source'),
        date=_require_text(payload, 'date'),
        trend=trend,
        commentary=_require_text(payload, 'commentary'),
    )
