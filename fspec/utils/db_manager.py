"""
Database manager for the catalog.

This module owns the SQLAlchemy engine and session for one catalog file.
All access is synchronous; a manager is used by a single command invocation.
"""

from collections.abc import Generator
from contextlib import contextmanager
from sqlite3 import Connection as SQLiteConnection
from typing import Any

from sqlalchemy import Engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from ..exceptions import CatalogClosedError, StorageIOError
from ..settings import Settings
from ..utils.logger import logger


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    """Turn on foreign key enforcement for every new SQLite connection."""
    if isinstance(dbapi_connection, SQLiteConnection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseManager:
    """
    Manages the engine and the session of one catalog database.

    The engine is created lazily and lives until :meth:`close`; after that the
    manager refuses to hand out sessions.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the database manager for the catalog described by ``settings``."""
        self._settings = settings
        self._engine: Engine | None = None
        self._session: Session | None = None
        self._closed = False

    def _create_engine(self) -> Engine:
        """Create and configure the database engine."""
        engine = create_engine(
            self._settings.database_url,
            echo=self._settings.database_echo,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        logger.debug(f"Database engine created: {self._settings.database_url}")
        return engine

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._closed:
            raise CatalogClosedError()
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    @property
    def session(self) -> Session:
        """Get or open the session held for the lifetime of the manager."""
        if self._closed:
            raise CatalogClosedError()
        if self._session is None:
            self._session = Session(self.engine, expire_on_commit=False)
        return self._session

    @property
    def is_closed(self) -> bool:
        return self._closed

    @contextmanager
    def get_session_context(self) -> Generator[Session, None, None]:
        """Yield the session, rolling back and re-raising on database errors.

        Raises:
            StorageIOError: If the database reports an error
        """
        session = self.session
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Catalog database error: {e}")
            raise StorageIOError(f"Catalog database error: {e}") from e

    def create_tables(self, *models: type[SQLModel]) -> None:
        """Create the tables of ``models`` that do not exist yet.

        Raises:
            StorageIOError: If the tables cannot be created
        """
        tables = [model.__table__ for model in models]  # type: ignore[attr-defined]
        try:
            SQLModel.metadata.create_all(self.engine, tables=tables, checkfirst=True)
        except SQLAlchemyError as e:
            raise StorageIOError(f"Failed to create catalog tables: {e}") from e
        for table in tables:
            logger.trace(f"Ensured {table.name} exists")

    def close(self) -> None:
        """Close the session and dispose of the engine. Safe to call twice."""
        if self._closed:
            return
        if self._session is not None:
            self._session.close()
            self._session = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.trace("Database engine disposed")
        self._closed = True

    def __repr__(self) -> str:
        """String representation of the DatabaseManager."""
        return (
            f"<DatabaseManager("
            f"url={self._settings.database_url}, "
            f"closed={self._closed}"
            f")>"
        )
