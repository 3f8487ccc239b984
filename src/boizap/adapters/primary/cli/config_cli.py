"""
Configuration CLI commands.

Manages user preferences such as the default region and species.
"""
import argparse
import json

from ....configuration.config import get_config
from ....domain.livestock.species import Species
from ....domain.shared.value_objects import Region


def show_config_command(args: argparse.Namespace) -> int:
    config = get_config()
    print(f"Config file: {config.config_path}")
    print(json.dumps(config.as_dict(), indent=2))
    return 0


def set_region_command(args: argparse.Namespace) -> int:
    """
    Set default market region.

    Returns:
        0 on success, 1 on error
    """
    try:
        region = Region.from_code(args.region)
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    get_config().default_region = region.value
    print(f"✅ Set default region to {region.value}")
    return 0


def set_species_command(args: argparse.Namespace) -> int:
    species = Species.from_code(args.species)
    get_config().default_species = species.code
    print(f"✅ Set default species to {species.code} ({species.label})")
    return 0


def clear_config_command(args: argparse.Namespace) -> int:
    get_config().clear()
    print("✅ Cleared configuration")
    return 0


def setup_config_commands(subparsers):
    """Setup config CLI commands"""
    config_parser = subparsers.add_parser("config", help="Manage user preferences")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    show_parser = config_subparsers.add_parser("show", help="Show configuration")
    show_parser.set_defaults(func=show_config_command)

    region_parser = config_subparsers.add_parser("set-region", help="Set default market region")
    region_parser.add_argument("region")
    region_parser.set_defaults(func=set_region_command)

    species_parser = config_subparsers.add_parser("set-species", help="Set default species")
    species_parser.add_argument("species", choices=[s.code for s in Species])
    species_parser.set_defaults(func=set_species_command)

    clear_parser = config_subparsers.add_parser("clear", help="Clear all preferences")
    clear_parser.set_defaults(func=clear_config_command)
