"""
Valuation CLI commands.

`defaults` prints the growth defaults of a species/management pair and
`simulate` runs a full valuation of one batch.
"""
import argparse
import asyncio

from ....configuration.config import get_config
from ....configuration.container import get_mediator
from ....application.livestock.queries.resolve_defaults import (
    ResolveDefaultsQuery,
    ListManagementSystemsQuery,
)
from ....application.valuation.commands.run_valuation import RunValuationCommand
from ....domain.livestock.batch import BatchParameters
from ....domain.livestock.defaults import default_management_system, default_sale_unit
from ....domain.livestock.exceptions import InvalidCombinationError, BatchValidationError
from ....domain.livestock.species import Species, ManagementSystem
from ....domain.shared.value_objects import Region, MARKET_REGIONS
from ....domain.valuation.engine import ResultSummary


def _resolve_species(args: argparse.Namespace) -> Species:
    code = args.species or get_config().default_species or Species.CATTLE.code
    return Species.from_code(code)


def _resolve_region(args: argparse.Namespace) -> Region:
    code = args.region or get_config().default_region or Region.SP.value
    return Region.from_code(code)


def _resolve_management(args: argparse.Namespace, species: Species) -> ManagementSystem:
    if args.management:
        return ManagementSystem.from_code(args.management)
    return default_management_system(species)


def _print_summary(result: ResultSummary) -> None:
    batch = result.batch
    quote = result.quote
    print(f"Batch: {batch.batch_size} x {batch.species.label} ({batch.management.label}), "
          f"{batch.period_days} days, market {batch.region}")
    print(f"  Final weight/animal: {result.final_weight_per_animal_kg:,.1f} kg")
    print(f"  Initial weight:      {result.total_initial_weight_kg:,.0f} kg")
    print(f"  Final weight:        {result.total_final_weight_kg:,.0f} kg")
    print(f"  Weight gain:         +{result.weight_gain_kg:,.0f} kg")
    print(f"  Carcass weight:      {result.total_carcass_weight_kg:,.1f} kg")
    print(f"  Net production:      {result.total_units:,.1f} {quote.unit.symbol}")
    print(f"  Quote:               R$ {quote.price:,.2f} /{quote.unit.symbol} "
          f"({quote.source}, {quote.date}, trend {quote.trend.value})")
    if quote.commentary:
        print(f"  Commentary:          {quote.commentary}")
    print(f"  Total value:         R$ {result.total_value:,.2f}")


def defaults_command(args: argparse.Namespace) -> int:
    """Handle defaults command"""
    mediator = get_mediator()
    try:
        species = _resolve_species(args)
        management = _resolve_management(args, species)
        defaults = asyncio.run(mediator.send_async(
            ResolveDefaultsQuery(species=species, management=management)
        ))
        options = asyncio.run(mediator.send_async(ListManagementSystemsQuery(species=species)))
    except (InvalidCombinationError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"{species.label} - {species.description} (sold per {default_sale_unit(species).symbol})")
    print(f"  Management systems: {', '.join(m.code for m in options)}")
    print(f"  {management.label}:")
    print(f"    Daily gain:     {defaults.daily_gain_kg} kg/day")
    print(f"    Carcass yield:  {defaults.carcass_yield_percent}%")
    print(f"    Initial weight: {defaults.initial_weight_kg} kg")
    print(f"    Period:         {defaults.period_label}")
    return 0


def simulate_command(args: argparse.Namespace) -> int:
    """Handle simulate command"""
    try:
        species = _resolve_species(args)
        params = BatchParameters.from_defaults(
            species,
            _resolve_management(args, species),
            region=_resolve_region(args),
        )
    except (InvalidCombinationError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1

    # Explicit flags win over the defaults just applied
    if args.batch_size is not None:
        params.batch_size = args.batch_size
    if args.period_days is not None:
        params.period_days = args.period_days
    if args.initial_weight is not None:
        params.initial_weight_kg = args.initial_weight
    if args.daily_gain is not None:
        params.daily_gain_kg = args.daily_gain
    if args.carcass_yield is not None:
        params.carcass_yield_percent = args.carcass_yield
    params.manual_price_override = args.manual_price

    mediator = get_mediator()
    try:
        result = asyncio.run(mediator.send_async(RunValuationCommand.for_batch(params)))
    except BatchValidationError as e:
        print(f"❌ Invalid batch: {e}")
        return 1

    _print_summary(result)
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def setup_valuation_commands(subparsers):
    """Setup valuation CLI commands"""
    defaults_parser = subparsers.add_parser("defaults", help="Show growth defaults")
    defaults_parser.add_argument("--species", choices=[s.code for s in Species])
    defaults_parser.add_argument("--management", choices=[m.code for m in ManagementSystem])
    defaults_parser.set_defaults(func=defaults_command)

    simulate_parser = subparsers.add_parser("simulate", help="Project growth and value a batch")
    simulate_parser.add_argument("--species", choices=[s.code for s in Species])
    simulate_parser.add_argument("--management", choices=[m.code for m in ManagementSystem])
    simulate_parser.add_argument(
        "--region",
        help=f"Brazilian state code; regional markets: {', '.join(r.value for r in MARKET_REGIONS)}"
    )
    simulate_parser.add_argument("--batch-size", type=_positive_int)
    simulate_parser.add_argument("--period-days", type=_positive_int)
    simulate_parser.add_argument("--initial-weight", type=float, help="Initial weight per animal (kg)")
    simulate_parser.add_argument("--daily-gain", type=float, help="Daily gain per animal (kg/day)")
    simulate_parser.add_argument("--yield", dest="carcass_yield", type=float, help="Carcass yield (%%)")
    simulate_parser.add_argument("--manual-price", type=float, help="Price per sale unit, overrides the market quote")
    simulate_parser.set_defaults(func=simulate_command)
