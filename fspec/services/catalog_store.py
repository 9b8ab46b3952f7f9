"""
Catalog store.

Owns the relational persistence of the catalog: makes sure the catalog
directory, file and tables exist, projects the pipeline type registry into
them idempotently, and rebuilds pipeline type specifications from what is
stored.
"""

from types import TracebackType
from typing import Self

from ..exceptions import (
    MalformedCatalogStateError,
    StorageIOError,
    UnrecognizedParameterTypeError,
)
from ..models.catalog import CONFIG_TABLES, PIPELINE_TABLES, PIPELINE_TYPE_TABLES
from ..models.parameter_schema import ParameterSchema
from ..models.pipeline_type import PipelineTypeSpecification
from ..repositories import ParameterTypeRepository, PipelineTypeRepository
from ..settings import Settings
from ..utils import bootstrap
from ..utils.db_manager import DatabaseManager
from ..utils.logger import logger


class CatalogStore:
    """Handle on an initialized catalog.

    Obtain one with :meth:`initialize`. The database connection is held until
    :meth:`close` (or the end of a ``with`` block); a closed store raises
    :class:`~fspec.exceptions.CatalogClosedError`.
    """

    def __init__(self, settings: Settings, db_manager: DatabaseManager) -> None:
        self.settings = settings
        self.db_manager = db_manager

    @classmethod
    def initialize(cls, settings: Settings) -> Self:
        """Open the catalog at ``settings.fspec_directory`` and synchronize it.

        Safe to repeat: existing rows are reused, never duplicated or overwritten.

        Raises:
            StorageIOError: If the directory or database cannot be used
            UnknownPipelineTypeError: If a stored pipeline type is not in the registry
            MalformedCatalogStateError: If stored rows violate referential integrity
        """
        cls._ensure_directory(settings)

        db_path = settings.database_path
        if not db_path.exists():
            logger.info(f"Fspec database not found at {db_path}, creating")
        else:
            logger.info(f"Fspec database already initialized at {db_path}, reusing")

        store = cls(settings, DatabaseManager(settings))
        try:
            store._synchronize()
        except BaseException:
            store.close()
            raise
        return store

    @staticmethod
    def _ensure_directory(settings: Settings) -> None:
        directory = settings.fspec_directory
        if directory.is_dir():
            return
        logger.info(f"Fspec directory not found, attempting to create at {directory}")
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create fspec directory {directory}: {e}") from e

    def _synchronize(self) -> None:
        db = self.db_manager

        logger.trace("Ensuring configuration table")
        db.create_tables(*CONFIG_TABLES)
        with db.get_session_context() as session:
            bootstrap.ensure_config_entry(session, str(self.settings.fspec_directory))

        logger.trace("Ensuring pipeline type tables created and populated")
        db.create_tables(*PIPELINE_TYPE_TABLES)
        with db.get_session_context() as session:
            bootstrap.seed_pipeline_types(session)
            bootstrap.seed_parameter_types(session)

        logger.trace("Ensuring pipeline tables created")
        db.create_tables(*PIPELINE_TABLES)

        self.check_integrity()

    def check_integrity(self) -> None:
        """Fail if any parameter row points at a missing pipeline type row.

        Raises:
            MalformedCatalogStateError: If orphaned parameter rows exist
        """
        with self.db_manager.get_session_context() as session:
            orphans = ParameterTypeRepository(session).find_orphans()
        if orphans:
            details = ", ".join(
                f"{row.parameter_name} (pipeline_type_id={row.pipeline_type_id})" for row in orphans
            )
            raise MalformedCatalogStateError(
                f"Parameter types reference missing pipeline types: {details}"
            )

    def read_available_types(self) -> list[PipelineTypeSpecification]:
        """Rebuild one specification per stored pipeline type.

        Pipeline types come in row id order, each with its parameter schemas
        in row id order.

        Raises:
            UnknownPipelineTypeError: If a stored pipeline type is not recognized
            UnrecognizedParameterTypeError: If a stored parameter type is not recognized
            MalformedCatalogStateError: If stored rows violate referential integrity
                or hold an invalid parameter schema
        """
        self.check_integrity()

        resolved: list[PipelineTypeSpecification] = []
        with self.db_manager.get_session_context() as session:
            parameter_repo = ParameterTypeRepository(session)
            for row in PipelineTypeRepository(session).list_in_storage_order():
                logger.trace(f"Resolving parameters for type {row.name} with id {row.id}")
                parameters = []
                for param in parameter_repo.list_for_pipeline_type(row.id):
                    logger.trace(
                        f"Resolved {param.parameter_name} parameter (id={param.id}, "
                        f"required={param.required}, param_type={param.parameter_type})"
                    )
                    try:
                        schema = ParameterSchema.from_raw(
                            param.parameter_name, param.parameter_type, param.required
                        )
                    except (UnrecognizedParameterTypeError, MalformedCatalogStateError) as e:
                        e.with_context(
                            f"{e} (parameter type row id={param.id} of pipeline type {row.name})"
                        )
                        raise
                    parameters.append(schema)
                spec = PipelineTypeSpecification.from_name(row.name)
                resolved.append(spec.with_parameter_types(parameters))
        return resolved

    def close(self) -> None:
        """Release the database connection. Safe to call more than once."""
        self.db_manager.close()

    @property
    def is_closed(self) -> bool:
        return self.db_manager.is_closed

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
