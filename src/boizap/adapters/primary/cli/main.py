#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ....configuration.settings import reload_settings, settings
from .valuation_cli import setup_valuation_commands
from .config_cli import setup_config_commands


def _load_environment() -> None:
    """Load .env from the working directory, then refresh settings"""
    dotenv_path = Path.cwd() / '.env'
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
    reload_settings()


def main():
    _load_environment()

    parser = argparse.ArgumentParser(description="BoiZap Market - livestock growth and valuation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    setup_valuation_commands(subparsers)
    setup_config_commands(subparsers)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
