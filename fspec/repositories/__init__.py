"""Repository layer for catalog data access."""

from .base import BaseRepository
from .config_repository import ConfigRepository
from .parameter_type_repository import ParameterTypeRepository
from .pipeline_type_repository import PipelineTypeRepository

__all__ = [
    "BaseRepository",
    "ConfigRepository",
    "ParameterTypeRepository",
    "PipelineTypeRepository",
]
