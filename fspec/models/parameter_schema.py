"""Parameter schema: a named, typed, required/optional pipeline input."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..exceptions import InvalidParameterValueError, MalformedCatalogStateError
from ..utils.logger import logger
from .parameter_types import ParameterType, decode_parameter_type, encode_parameter_type


class ParameterSchema(BaseModel):
    """Declaration of one configuration input a pipeline type accepts.

    Args:
        name: Parameter name, unique within its pipeline type.
        required: Whether a pipeline must supply a value.
        parameter_type: Variant describing how values are validated.
    """

    name: str = Field(min_length=1)
    required: bool
    parameter_type: ParameterType

    @classmethod
    def from_raw(cls, name: str, type_name: str, required: bool) -> "ParameterSchema":
        """Build a schema from its stored parts.

        Raises:
            UnrecognizedParameterTypeError: If ``type_name`` matches no variant
            MalformedCatalogStateError: If the parts do not form a valid schema
        """
        logger.trace(
            f"Creating schema from raw parts name={name} type_name={type_name} required={required}"
        )
        parameter_type = decode_parameter_type(type_name)
        try:
            return cls(name=name, required=required, parameter_type=parameter_type)
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise MalformedCatalogStateError(
                f"Invalid parameter schema '{name}' ({type_name}): {errors}"
            ) from e

    @property
    def type_name(self) -> str:
        return encode_parameter_type(self.parameter_type)

    def validate_value(self, value: Any) -> Any:
        """Validate a value for this parameter and return it normalized."""
        try:
            return self.parameter_type.validate_value(value)
        except InvalidParameterValueError as e:
            raise InvalidParameterValueError(e.reason, parameter_name=self.name) from e

    def render(self) -> str:
        return f"{self.name} (required={str(self.required).lower()}, type={self.type_name})"
