"""
Unit tests for quote payload parsing
"""
import json

import pytest

from boizap.adapters.secondary.market.payload import parse_quote_payload
from boizap.domain.market.exceptions import QuoteFetchError
from boizap.domain.market.quote import Trend
from boizap.domain.shared.value_objects import SaleUnit


@pytest.fixture
def payload():
    return {
        "price": 312.4,
        "unit": "@",
        "source": "CEPEA",
        "date": "02/05/2024",
        "trend": "up",
        "commentary": "Oferta restrita.",
    }


class TestValidPayloads:

    def test_parses_object(self, payload):
        quote = parse_quote_payload(payload)

        assert quote.price == pytest.approx(312.4)
        assert quote.unit is SaleUnit.ARROBA
        assert quote.source == "CEPEA"
        assert quote.date == "02/05/2024"
        assert quote.trend is Trend.UP
        assert quote.commentary == "Oferta restrita."
        assert quote.is_manual is False

    def test_parses_json_text_and_bytes(self, payload):
        text = json.dumps(payload)
        assert parse_quote_payload(text) == parse_quote_payload(text.encode())

    def test_unwraps_data_envelope(self, payload):
        assert parse_quote_payload({"data": payload}).price == pytest.approx(312.4)

    def test_integer_price(self, payload):
        payload["price"] = 8
        payload["unit"] = "kg"
        quote = parse_quote_payload(payload)
        assert quote.price == 8.0
        assert quote.unit is SaleUnit.KILOGRAM


class TestMalformedPayloads:

    def test_invalid_json(self):
        with pytest.raises(QuoteFetchError, match="not valid JSON"):
            parse_quote_payload("{price: 1")

    def test_not_an_object(self):
        with pytest.raises(QuoteFetchError):
            parse_quote_payload("[1, 2]")

    @pytest.mark.parametrize("missing", ["price", "unit", "source", "date", "trend", "commentary"])
    def test_missing_field(self, payload, missing):
        del payload[missing]
        with pytest.raises(QuoteFetchError, match=missing):
            parse_quote_payload(payload)

    @pytest.mark.parametrize("field, value", [
        ("price", "312,40"),
        ("price", True),
        ("price", 0),
        ("price", -1.5),
        ("price", float("nan")),
        ("price", float("inf")),
        ("unit", "lb"),
        ("unit", None),
        ("trend", "sideways"),
        ("source", 42),
        ("date", None),
        ("commentary", ["a"]),
    ])
    def test_malformed_field(self, payload, field, value):
        payload[field] = value
        with pytest.raises(QuoteFetchError):
            parse_quote_payload(payload)

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_price_in_json_text(self, token):
        body = (
            '{"price": %s, "unit": "@", "source": "CEPEA", "date": "02/05/2024",'
            ' "trend": "up", "commentary": "x"}' % token
        ).encode()

        with pytest.raises(QuoteFetchError, match="price"):
            parse_quote_payload(body)
