"""
Domain exceptions for the catalog.

These exceptions are raised by the models, repositories and services and are
propagated unchanged to the command layer, which reports them and exits non-zero.
"""

from typing import Self


class FspecError(Exception):
    """Base exception for all fspec-specific errors."""

    def with_context(self, detail: str) -> Self:
        """Add context information to the exception.

        Args:
            detail: Additional details about the error

        Returns:
            Self with updated message
        """
        self.args = (detail,)
        return self


# Catalog/code version mismatches
class UnrecognizedParameterTypeError(FspecError):
    """Raised when a parameter type name matches no known variant."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unrecognized parameter type '{type_name}'")


class UnknownPipelineTypeError(FspecError):
    """Raised when a pipeline type name has no registry entry."""

    def __init__(self, kind_name: str) -> None:
        self.kind_name = kind_name
        super().__init__(f"Unrecognized pipeline type '{kind_name}'")


# Storage
class StorageIOError(FspecError):
    """Raised when the catalog directory, file or database cannot be used."""

    pass


class CatalogClosedError(StorageIOError):
    """Raised when a closed catalog store is used."""

    def __init__(self) -> None:
        super().__init__("Catalog store has been closed")


class MalformedCatalogStateError(FspecError):
    """Raised when persisted catalog rows violate referential integrity."""

    pass


# Parameter values
class InvalidParameterValueError(FspecError):
    """Raised when a value does not satisfy its parameter's validation rule."""

    def __init__(self, reason: str, parameter_name: str | None = None) -> None:
        self.parameter_name = parameter_name
        self.reason = reason
        if parameter_name:
            super().__init__(f"Invalid value for parameter '{parameter_name}': {reason}")
        else:
            super().__init__(f"Invalid parameter value: {reason}")
