"""
Bootstrap utilities for catalog initialization.

Each function makes sure canonical rows exist without duplicating or
overwriting what is already stored: look the row up, insert it if absent,
then read back what is persisted.
"""

from sqlmodel import Session

from ..repositories import ConfigRepository, ParameterTypeRepository, PipelineTypeRepository
from ..services.pipeline_registry import SEED_PIPELINE_TYPES, canonical_parameter_schemas
from ..utils.logger import logger


def ensure_config_entry(session: Session, fspec_directory: str) -> None:
    """Record the catalog directory in the metadata table if absent."""
    repo = ConfigRepository(session)

    logger.trace("Ensuring context metadata exists in configuration table")
    _, created = repo.ensure(fspec_directory)
    if created:
        logger.debug(f"Recorded catalog directory {fspec_directory}")

    for entry in repo.list_all():
        logger.trace(
            f"Fspec database has config dir {entry.fspec_directory} "
            f"and creation time {entry.created_at}"
        )


def seed_pipeline_types(session: Session) -> None:
    """Insert a row for every registry pipeline type that is not stored yet."""
    repo = PipelineTypeRepository(session)

    for pipeline_type in SEED_PIPELINE_TYPES:
        _, created = repo.ensure(pipeline_type.value)
        if created:
            logger.debug(f"Created pipeline type: {pipeline_type.value}")
        else:
            logger.trace(f"Pipeline type already exists: {pipeline_type.value}")


def seed_parameter_types(session: Session) -> None:
    """Insert the canonical parameter rows of every stored pipeline type.

    Works from the persisted pipeline type rows, so ids from earlier runs are
    reused.

    Raises:
        UnknownPipelineTypeError: If a stored pipeline type is not in the registry
    """
    pipeline_types = PipelineTypeRepository(session).list_by_name()
    parameter_repo = ParameterTypeRepository(session)

    for row in pipeline_types:
        logger.trace(
            f"Loaded pipeline type {row.name} (ctx id {row.id}), ensuring parameter types configured"
        )
        for name, required, type_name in canonical_parameter_schemas(row.name):
            logger.trace(f"Ensuring parameter type {name} configured for pipeline type {row.name}")
            _, created = parameter_repo.ensure(row.id, name, required, type_name)
            if created:
                logger.debug(f"Created parameter type {name} ({type_name}) for {row.name}")
