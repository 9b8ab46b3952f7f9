"""
Pipeline types and their specifications.

``PipelineType`` is the closed set of pipeline kinds. A
``PipelineTypeSpecification`` pairs a kind with the ordered parameter schemas
it accepts, either seeded from the registry or read back from the catalog.
"""

import enum
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from ..exceptions import InvalidParameterValueError, UnknownPipelineTypeError
from ..types import ParameterValues
from .parameter_schema import ParameterSchema

PARAMETER_INDENT = "    "


class PipelineType(str, enum.Enum):
    """Enumeration of pipeline kinds."""

    HttpWebEndpoint = "HttpWebEndpoint"
    StaticList = "StaticList"

    @classmethod
    def from_name(cls, name: str) -> "PipelineType":
        """Look up a kind by its stored name.

        Raises:
            UnknownPipelineTypeError: If no kind has that name
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownPipelineTypeError(name) from None


class PipelineTypeSpecification(BaseModel):
    """A pipeline kind together with its parameter schemas."""

    pipeline_type: PipelineType
    parameter_types: list[ParameterSchema] = Field(default_factory=list)

    @classmethod
    def from_name(cls, name: str) -> "PipelineTypeSpecification":
        """Create a specification with no parameters for the named kind."""
        return cls(pipeline_type=PipelineType.from_name(name))

    def with_parameter_types(self, parameter_types: Iterable[ParameterSchema]) -> "PipelineTypeSpecification":
        """Append parameter schemas in the given order and return self."""
        self.parameter_types.extend(parameter_types)
        return self

    @property
    def name(self) -> str:
        return self.pipeline_type.value

    def get_parameter(self, name: str) -> ParameterSchema | None:
        """Get a parameter schema by name, or None if not declared."""
        return next((p for p in self.parameter_types if p.name == name), None)

    def validate_parameters(self, values: ParameterValues) -> ParameterValues:
        """Validate a full set of parameter values for a pipeline of this kind.

        Args:
            values: Parameter name to value mapping

        Returns:
            Mapping with every supplied value normalized by its parameter type

        Raises:
            InvalidParameterValueError: On an undeclared parameter, a missing
                required parameter or a value rejected by its parameter type
        """
        unknown = sorted(set(values) - {p.name for p in self.parameter_types})
        if unknown:
            raise InvalidParameterValueError(
                f"{self.name} does not declare parameter(s) {', '.join(unknown)}"
            )

        validated: dict[str, Any] = {}
        for schema in self.parameter_types:
            if schema.name not in values:
                if schema.required:
                    raise InvalidParameterValueError(
                        "required parameter is missing", parameter_name=schema.name
                    )
                continue
            validated[schema.name] = schema.validate_value(values[schema.name])
        return validated

    def render(self) -> str:
        """Human-readable block: kind, parameter count, one line per parameter."""
        lines = [f"{self.name} ({len(self.parameter_types)} params)"]
        lines.extend(f"{PARAMETER_INDENT}{p.render()}" for p in self.parameter_types)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
