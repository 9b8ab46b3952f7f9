"""
fspec data models.

Domain models for pipeline types and parameter schemas, and the SQLModel
tables they are persisted in.
"""

from .catalog import (
    FspecConfig,
    FspecPipeline,
    FspecPipelineParameterType,
    FspecPipelineParameterValue,
    FspecPipelineType,
)
from .parameter_schema import ParameterSchema
from .parameter_types import (
    ParameterType,
    ParameterTypeBase,
    StaticListParameterType,
    ValidUrlParameterType,
    decode_parameter_type,
    encode_parameter_type,
)
from .pipeline_type import PipelineType, PipelineTypeSpecification

__all__ = [
    # Catalog tables
    "FspecConfig",
    "FspecPipeline",
    "FspecPipelineParameterType",
    "FspecPipelineParameterValue",
    "FspecPipelineType",
    # Parameters
    "ParameterSchema",
    "ParameterType",
    "ParameterTypeBase",
    "StaticListParameterType",
    "ValidUrlParameterType",
    "decode_parameter_type",
    "encode_parameter_type",
    # Pipeline types
    "PipelineType",
    "PipelineTypeSpecification",
]
