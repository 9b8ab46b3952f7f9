"""Repository for persisted pipeline types."""

from collections.abc import Sequence

from sqlmodel import Session

from ..models.catalog import FspecPipelineType
from .base import BaseRepository


class PipelineTypeRepository(BaseRepository[FspecPipelineType]):
    """Repository for the ``fspec_pipeline_type`` table."""

    def __init__(self, session: Session):
        super().__init__(session, FspecPipelineType)

    def ensure(self, name: str) -> tuple[FspecPipelineType, bool]:
        """Insert a pipeline type row keyed by name if it does not exist.

        Returns:
            The persisted row and whether it was created
        """
        return self.create_if_absent(FspecPipelineType(name=name), name=name)

    def list_by_name(self) -> Sequence[FspecPipelineType]:
        """All pipeline type rows ordered by name."""
        return self.list_all(FspecPipelineType.name)

    def list_in_storage_order(self) -> Sequence[FspecPipelineType]:
        """All pipeline type rows in row id order."""
        return self.list_all(FspecPipelineType.id)
