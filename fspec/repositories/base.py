"""Base repository with common catalog operations."""

from collections.abc import Sequence
from typing import Any, Generic, TypeAlias, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select
from sqlmodel.sql.expression import SelectOfScalar

from ..exceptions import MalformedCatalogStateError
from ..utils.logger import logger

FilterValueT: TypeAlias = str | int | float | bool

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """Base repository providing common database operations."""

    def __init__(self, session: Session, model_class: type[ModelT]):
        """Initialize repository with session and model class.

        Args:
            session: Database session
            model_class: SQLModel class this repository operates on
        """
        self.session = session
        self.model_class = model_class

    def _filtered(self, statement: SelectOfScalar[Any], **filters: FilterValueT) -> SelectOfScalar[Any]:
        for field, value in filters.items():
            if hasattr(self.model_class, field):
                statement = statement.where(getattr(self.model_class, field) == value)
        return statement

    def get_by(self, **filters: FilterValueT) -> ModelT | None:
        """Get single entity by filters.

        Args:
            **filters: Field-value pairs to filter by

        Returns:
            Found entity or None
        """
        statement = self._filtered(select(self.model_class), **filters)
        return self.session.exec(statement).first()

    def exists(self, **filters: FilterValueT) -> bool:
        """Check if entity exists with given filters."""
        return self.count(**filters) > 0

    def count(self, **filters: FilterValueT) -> int:
        """Count entities matching filters.

        Args:
            **filters: Field-value pairs to filter by

        Returns:
            Number of matching entities
        """
        statement = self._filtered(select(func.count()).select_from(self.model_class), **filters)
        return self.session.exec(statement).one()

    def list_all(self, *order_by: Any, **filters: FilterValueT) -> Sequence[ModelT]:
        """List all entities matching filters.

        Args:
            *order_by: Columns to order by
            **filters: Field-value pairs to filter by

        Returns:
            List of all matching entities
        """
        statement = self._filtered(select(self.model_class), **filters)
        if order_by:
            statement = statement.order_by(*order_by)
        return self.session.exec(statement).all()

    def create(self, entity: ModelT) -> ModelT:
        """Create new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with refreshed data

        Raises:
            MalformedCatalogStateError: If the row violates a catalog constraint
        """
        try:
            self.session.add(entity)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.error(f"Failed to add {self.model_class.__name__}: {e.orig}")
            raise MalformedCatalogStateError(
                f"{self.model_class.__name__} violates a catalog constraint: {e.orig}"
            ) from e
        self.session.refresh(entity)
        return entity

    def create_if_absent(self, entity: ModelT, **keys: FilterValueT) -> tuple[ModelT, bool]:
        """Insert ``entity`` unless a row matching ``keys`` already exists.

        Args:
            entity: Entity to insert when absent
            **keys: Field-value pairs identifying the row

        Returns:
            The persisted row and whether it was created by this call
        """
        existing = self.get_by(**keys)
        if existing is not None:
            return existing, False
        return self.create(entity), True
