"""Step definitions for growth defaults and the defaults overwrite policy"""
import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from boizap.domain.livestock.batch import BatchParameters
from boizap.domain.livestock.defaults import (
    resolve_defaults,
    legal_management_systems,
    default_management_system,
    default_sale_unit,
)
from boizap.domain.livestock.exceptions import InvalidCombinationError
from boizap.domain.livestock.species import Species, ManagementSystem
from boizap.domain.shared.value_objects import Region

scenarios('../../features/domain/growth_defaults.feature')


# ============================================================================
# Given Steps
# ============================================================================

@given(parsers.parse('a "{species}" batch under "{management}"'))
def batch_under(context, species, management):
    context['batch'] = BatchParameters.from_defaults(
        Species.from_code(species), ManagementSystem.from_code(management)
    )
    context['subject'] = context['batch']


@given(parsers.parse('the batch has {size:d} animals over {days:d} days in region "{region}"'))
def batch_size_period_region(context, size, days, region):
    batch = context['batch']
    batch.batch_size = size
    batch.period_days = days
    batch.region = Region.from_code(region)


@given(parsers.parse('the daily gain was tuned to {gain:g} kg per day'))
def tune_daily_gain(context, gain):
    context['batch'].daily_gain_kg = gain


@given(parsers.parse('a manual price of {price:g} was entered'))
def manual_price_entered(context, price):
    context['batch'].manual_price_override = price


# ============================================================================
# When Steps
# ============================================================================

@when(parsers.parse('I resolve defaults for "{species}" under "{management}"'))
def resolve_pair(context, species, management):
    try:
        context['defaults'] = resolve_defaults(
            Species.from_code(species), ManagementSystem.from_code(management)
        )
        context['subject'] = context['defaults']
    except InvalidCombinationError as e:
        context['error'] = e


@when(parsers.parse('I resolve defaults for "{species}" under "{management}" again'))
def resolve_pair_again(context, species, management):
    context['defaults_again'] = resolve_defaults(
        Species.from_code(species), ManagementSystem.from_code(management)
    )


@when(parsers.parse('I list the management systems for "{species}"'))
def list_management(context, species):
    context['species'] = Species.from_code(species)
    context['options'] = legal_management_systems(context['species'])


@when(parsers.parse('the species is switched to "{species}"'))
def switch_species(context, species):
    context['batch'].select_species(Species.from_code(species))


@when(parsers.parse('the management system is switched to "{management}"'))
def switch_management(context, management):
    try:
        context['batch'].select_management(ManagementSystem.from_code(management))
    except InvalidCombinationError as e:
        context['error'] = e


# ============================================================================
# Then Steps
# ============================================================================

@then(parsers.parse('the daily gain should be {gain:g} kg per day'))
def check_daily_gain(context, gain):
    assert context['subject'].daily_gain_kg == pytest.approx(gain)


@then(parsers.parse('the carcass yield should be {carcass_yield:g} percent'))
def check_carcass_yield(context, carcass_yield):
    assert context['subject'].carcass_yield_percent == pytest.approx(carcass_yield)


@then(parsers.parse('the initial weight should be {initial:g} kg'))
def check_initial_weight(context, initial):
    assert context['subject'].initial_weight_kg == pytest.approx(initial)


@then(parsers.parse('the period label should be "{label}"'))
def check_period_label(context, label):
    assert context['defaults'].period_label == label


@then('the carcass yield should be within 0 and 100 percent')
def check_yield_range(context):
    assert 0 <= context['defaults'].carcass_yield_percent <= 100


@then('both lookups should be identical')
def check_identical(context):
    assert context['defaults'] == context['defaults_again']


@then('an invalid combination error should be raised')
def check_invalid_combination(context):
    assert isinstance(context.get('error'), InvalidCombinationError)


@then(parsers.parse('the first option should be "{management}"'))
def check_first_option(context, management):
    assert context['options'][0] == ManagementSystem.from_code(management)


@then(parsers.parse('the default management system should be "{management}"'))
def check_default_management(context, management):
    assert default_management_system(context['species']) == ManagementSystem.from_code(management)


@then(parsers.parse('the species should be sold per "{unit}"'))
def check_sale_unit(context, unit):
    assert default_sale_unit(context['species']).symbol == unit


@then(parsers.parse('the management system should be "{management}"'))
def check_management(context, management):
    assert context['batch'].management == ManagementSystem.from_code(management)


@then(parsers.parse('the batch should still have {size:d} animals over {days:d} days in region "{region}"'))
def check_batch_kept(context, size, days, region):
    batch = context['batch']
    assert batch.batch_size == size
    assert batch.period_days == days
    assert batch.region == Region.from_code(region)


@then(parsers.parse('the manual price should still be {price:g}'))
def check_manual_price_kept(context, price):
    assert context['batch'].manual_price_override == pytest.approx(price)
