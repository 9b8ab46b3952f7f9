"""Repository for persisted parameter schemas."""

from collections.abc import Sequence

from sqlmodel import Session, col, select

from ..models.catalog import FspecPipelineParameterType, FspecPipelineType
from .base import BaseRepository


class ParameterTypeRepository(BaseRepository[FspecPipelineParameterType]):
    """Repository for the ``fspec_pipeline_parameter_type`` table."""

    def __init__(self, session: Session):
        super().__init__(session, FspecPipelineParameterType)

    def ensure(
        self, pipeline_type_id: int, parameter_name: str, required: bool, parameter_type: str
    ) -> tuple[FspecPipelineParameterType, bool]:
        """Insert a parameter type row keyed by parameter name if it does not exist.

        An existing row with the same name is left untouched, even if it
        belongs to another pipeline type or differs in the other columns.
        """
        row = FspecPipelineParameterType(
            pipeline_type_id=pipeline_type_id,
            parameter_name=parameter_name,
            required=required,
            parameter_type=parameter_type,
        )
        return self.create_if_absent(row, parameter_name=parameter_name)

    def list_for_pipeline_type(self, pipeline_type_id: int) -> Sequence[FspecPipelineParameterType]:
        """Parameter rows of one pipeline type in row id order."""
        return self.list_all(FspecPipelineParameterType.id, pipeline_type_id=pipeline_type_id)

    def find_orphans(self) -> Sequence[FspecPipelineParameterType]:
        """Parameter rows whose pipeline type row does not exist."""
        known_ids = select(FspecPipelineType.id)
        statement = (
            select(FspecPipelineParameterType)
            .where(col(FspecPipelineParameterType.pipeline_type_id).not_in(known_ids))
            .order_by(FspecPipelineParameterType.id)
        )
        return self.session.exec(statement).all()
