"""
Catalog commands.

The two operations offered to the command layer. Both take an already
resolved ``Settings`` and let every error propagate to the caller.
"""

import enum
import sys
from typing import TextIO

from ..models.pipeline_type import PipelineTypeSpecification
from ..settings import Settings
from ..utils.logger import logger
from .catalog_store import CatalogStore


class FspecCommand(str, enum.Enum):
    """Commands understood by :func:`execute_command`."""

    Initialize = "init"
    ListAvailableTypes = "list"


def initialize(settings: Settings) -> None:
    """Create or synchronize the catalog, then release it."""
    logger.info(f"Initializing fspec at {settings.fspec_directory}")
    with CatalogStore.initialize(settings):
        pass


def list_available_types(
    settings: Settings, output: TextIO | None = None
) -> list[PipelineTypeSpecification]:
    """Print one block per pipeline type stored in the catalog.

    The catalog is initialized first, so listing works on a fresh directory.

    Args:
        settings: Resolved configuration
        output: Stream to write to (defaults to standard output)

    Returns:
        The specifications that were printed
    """
    with CatalogStore.initialize(settings) as store:
        types = store.read_available_types()

    stream = output if output is not None else sys.stdout
    for spec in types:
        print(spec.render(), file=stream)
    return types


def execute_command(command: FspecCommand, settings: Settings) -> None:
    """Run a catalog command."""
    match command:
        case FspecCommand.Initialize:
            initialize(settings)
        case FspecCommand.ListAvailableTypes:
            list_available_types(settings)
