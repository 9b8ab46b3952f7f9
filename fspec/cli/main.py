#!/usr/bin/env python3
"""fspec CLI - initialize the catalog and list the available pipeline types."""

import argparse
import sys
from pathlib import Path

from fspec.exceptions import FspecError
from fspec.services.catalog_service import FspecCommand, execute_command
from fspec.settings import Settings, get_settings
from fspec.utils.logger import logger, setup_logging, verbosity_to_level


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``fspec`` command."""
    parser = argparse.ArgumentParser(prog="fspec", description="Pipeline type catalog")
    parser.add_argument(
        "-v",
        dest="verbosity",
        action="count",
        default=0,
        help="Sets the verbosity level (-v, -vv, -vvv correspond to info, debug, and trace)",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=None,
        help="Catalog directory (default: .fspec or FSPEC_FSPEC_DIRECTORY)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("init", help="initializes the fspec database at a location")
    subparsers.add_parser("list", help="list the configured parameter types")
    return parser


def resolve_settings(directory: Path | None) -> Settings:
    """Settings from the environment, with the catalog directory overridden if given."""
    settings = get_settings()
    if directory is not None:
        settings = settings.model_copy(update={"fspec_directory": directory})
    return settings


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    settings = resolve_settings(args.directory)
    level = verbosity_to_level(args.verbosity) if args.verbosity else settings.log_level
    setup_logging(
        level=level,
        format=settings.log_format,
        log_to_file=settings.log_to_file,
        log_file=settings.get_log_dir() / "fspec.log" if settings.log_to_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        serialize=settings.log_serialize,
    )

    try:
        execute_command(FspecCommand(args.command), settings)
    except FspecError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
