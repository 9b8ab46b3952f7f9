"""Shared fixtures: a catalog location under tmp_path and raw SQLite access."""

import sqlite3
from collections.abc import Callable, Generator
from contextlib import closing
from typing import Any, TypeAlias

import pytest
from loguru import logger

from fspec.services.catalog_store import CatalogStore
from fspec.settings import Settings
from fspec.utils.db_manager import DatabaseManager

RowFetcher: TypeAlias = Callable[..., list[tuple[Any, ...]]]
SqlExecutor: TypeAlias = Callable[..., None]


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a catalog directory that does not exist yet."""
    return Settings(fspec_directory=tmp_path / ".fspec")


@pytest.fixture
def catalog_store(test_settings) -> Generator[CatalogStore, None, None]:
    """An initialized catalog store, closed after the test."""
    store = CatalogStore.initialize(test_settings)
    yield store
    store.close()


@pytest.fixture
def db_manager(test_settings) -> Generator[DatabaseManager, None, None]:
    """A database manager on an existing, empty catalog directory."""
    test_settings.fspec_directory.mkdir(parents=True)
    manager = DatabaseManager(test_settings)
    yield manager
    manager.close()


@pytest.fixture
def fetch_rows(test_settings) -> RowFetcher:
    """Run a query against the catalog file with a plain sqlite3 connection."""

    def _fetch(query: str, params: tuple[Any, ...] = ()) -> list[tuple[Any, ...]]:
        with closing(sqlite3.connect(test_settings.database_path)) as conn:
            return conn.execute(query, params).fetchall()

    return _fetch


@pytest.fixture
def execute_sql(test_settings) -> SqlExecutor:
    """Write to the catalog file the way another program would (no FK checks)."""

    def _execute(script: str) -> None:
        test_settings.fspec_directory.mkdir(parents=True, exist_ok=True)
        with closing(sqlite3.connect(test_settings.database_path)) as conn:
            conn.executescript(script)
            conn.commit()

    return _execute


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Drop loguru sinks installed by the CLI so they don't outlive capsys."""
    yield
    logger.remove()
