"""
Pipeline type registry.

The fixed catalog of pipeline kinds and the parameter schemas each accepts.
This table is the single source of truth the catalog store seeds from. A new
kind needs both a ``PipelineType`` member and an entry in
``CANONICAL_PARAMETER_SCHEMAS``; asking for a kind without an entry fails.
"""

from ..exceptions import UnknownPipelineTypeError
from ..models.parameter_schema import ParameterSchema
from ..models.pipeline_type import PipelineType, PipelineTypeSpecification
from ..types import CanonicalParameterRow

CANONICAL_PARAMETER_SCHEMAS: dict[PipelineType, tuple[CanonicalParameterRow, ...]] = {
    PipelineType.HttpWebEndpoint: (("Url", True, "ValidUrl"),),
    PipelineType.StaticList: (("Values", True, "StaticList"),),
}

# Insertion order used when seeding pipeline type rows
SEED_PIPELINE_TYPES: tuple[PipelineType, ...] = (
    PipelineType.HttpWebEndpoint,
    PipelineType.StaticList,
)


def _resolve(kind: PipelineType | str) -> PipelineType:
    if isinstance(kind, PipelineType):
        return kind
    return PipelineType.from_name(kind)


def canonical_parameter_schemas(kind: PipelineType | str) -> tuple[CanonicalParameterRow, ...]:
    """Seed rows ``(name, required, type_name)`` of a pipeline kind.

    Raises:
        UnknownPipelineTypeError: If the kind is unknown or has no table entry
    """
    pipeline_type = _resolve(kind)
    try:
        return CANONICAL_PARAMETER_SCHEMAS[pipeline_type]
    except KeyError:
        raise UnknownPipelineTypeError(pipeline_type.value) from None


def specification_for(kind_name: str) -> PipelineTypeSpecification:
    """Empty specification for a registered kind.

    Raises:
        UnknownPipelineTypeError: If the kind is unknown or has no table entry
    """
    canonical_parameter_schemas(kind_name)
    return PipelineTypeSpecification.from_name(kind_name)


def canonical_specification(kind: PipelineType | str) -> PipelineTypeSpecification:
    """Specification of a kind with its canonical parameter schemas attached."""
    pipeline_type = _resolve(kind)
    schemas = [
        ParameterSchema.from_raw(name, type_name, required)
        for name, required, type_name in canonical_parameter_schemas(pipeline_type)
    ]
    return specification_for(pipeline_type.value).with_parameter_types(schemas)
