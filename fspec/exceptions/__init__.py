"""
Exceptions for fspec.

Domain exceptions live in :mod:`fspec.exceptions.domain` and are re-exported here.
"""

from .domain import (
    CatalogClosedError,
    FspecError,
    InvalidParameterValueError,
    MalformedCatalogStateError,
    StorageIOError,
    UnknownPipelineTypeError,
    UnrecognizedParameterTypeError,
)

__all__ = [
    "CatalogClosedError",
    "FspecError",
    "InvalidParameterValueError",
    "MalformedCatalogStateError",
    "StorageIOError",
    "UnknownPipelineTypeError",
    "UnrecognizedParameterTypeError",
]
