"""Step definitions for the run valuation command"""
import asyncio

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from boizap.application.livestock.queries.resolve_defaults import ResolveDefaultsQuery
from boizap.application.valuation.commands.run_valuation import RunValuationCommand
from boizap.domain.livestock.batch import BatchParameters
from boizap.domain.livestock.exceptions import BatchValidationError, InvalidCombinationError
from boizap.domain.livestock.species import Species, ManagementSystem
from boizap.domain.market.quote import Quote, Trend
from boizap.domain.shared.value_objects import Region, SaleUnit

scenarios('../../features/application/run_valuation.feature')


@given(parsers.parse('a "{species}" batch under "{management}" in region "{region}"'))
def batch_in_region(context, species, management, region):
    context['batch'] = BatchParameters.from_defaults(
        Species.from_code(species),
        ManagementSystem.from_code(management),
        region=Region.from_code(region),
    )


@given(parsers.parse('the batch has {size:d} animals fattened for {days:d} days'))
def batch_size_and_period(context, size, days):
    context['batch'].batch_size = size
    context['batch'].period_days = days


@given(parsers.parse('a manual price of {price:g} per unit'))
def manual_price(context, price):
    context['batch'].manual_price_override = price


@given('the market provider is down')
def provider_down(market_provider):
    market_provider.fetch_quote.side_effect = TimeoutError("quote API timed out")


@given(parsers.parse('the market provider quotes {price:g} per "{unit}"'))
def provider_quotes(market_provider, price, unit):
    market_provider.fetch_quote.return_value = Quote(
        price=price,
        unit=SaleUnit.from_symbol(unit),
        source="CEPEA",
        date="2024-05-02",
        trend=Trend.UP,
        commentary="Demanda firme no atacado.",
    )


@when('I run the valuation')
def run_valuation(context, mediator):
    command = RunValuationCommand.for_batch(context['batch'])
    try:
        context['result'] = asyncio.run(mediator.send_async(command))
    except BatchValidationError as e:
        context['error'] = e


@when(parsers.parse('I request the defaults for "{species}" under "{management}"'))
def request_defaults(context, mediator, species, management):
    query = ResolveDefaultsQuery(
        species=Species.from_code(species),
        management=ManagementSystem.from_code(management),
    )
    try:
        context['defaults'] = asyncio.run(mediator.send_async(query))
    except InvalidCombinationError as e:
        context['error'] = e


@then('the valuation should report:')
def check_report(context, datatable):
    result = context['result']
    for field, expected in datatable:
        assert getattr(result, field) == pytest.approx(float(expected)), field


@then(parsers.parse('the valuation quote should be "{source}" per "{unit}"'))
def check_quote(context, source, unit):
    quote = context['result'].quote
    assert quote.source == source
    assert quote.unit.symbol == unit


@then('a batch validation error should be raised')
def check_validation_error(context):
    assert isinstance(context.get('error'), BatchValidationError)
    assert 'batch_size' in str(context['error'])


@then('the market provider should not have been asked')
def check_provider_not_called(market_provider):
    market_provider.fetch_quote.assert_not_awaited()


@then('the request should fail with an invalid combination error')
def check_invalid_combination(context):
    assert isinstance(context.get('error'), InvalidCombinationError)
