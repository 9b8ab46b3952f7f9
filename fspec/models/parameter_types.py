"""
Parameter type variants.

Each variant describes the validation semantics of a parameter value. Variants
are a closed, discriminated union keyed by ``type_name``; the type name is also
the stable string stored in the catalog. Adding a variant means adding a class
here and listing it in ``ParameterType``.
"""

import json
from abc import ABC, abstractmethod
from typing import Annotated, Any, ClassVar, Literal, get_args

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidParameterValueError, UnrecognizedParameterTypeError
from ..types import StaticListItem
from ..utils.validation import validate_json_by_schema

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class ParameterTypeBase(BaseModel, ABC):
    """Common behaviour of all parameter type variants."""

    model_config = ConfigDict(frozen=True)

    type_name: str

    @abstractmethod
    def validate_value(self, value: Any) -> Any:
        """Check a value against this variant's rule and return it normalized.

        Raises:
            InvalidParameterValueError: If the value breaks the rule
        """

    def __str__(self) -> str:
        return self.type_name


class ValidUrlParameterType(ParameterTypeBase):
    """Value must parse as a syntactically valid URL."""

    type_name: Literal["ValidUrl"] = "ValidUrl"

    def validate_value(self, value: Any) -> str:
        if not isinstance(value, str):
            raise InvalidParameterValueError(f"expected a URL string, got {type(value).__name__}")
        try:
            _URL_ADAPTER.validate_python(value)
        except PydanticValidationError as e:
            raise InvalidParameterValueError(f"'{value}' is not a valid URL") from e
        return value


class StaticListParameterType(ParameterTypeBase):
    """Value denotes a fixed list of literal values.

    Accepts a list, or the JSON array text it is stored as.
    """

    type_name: Literal["StaticList"] = "StaticList"

    item_schema: ClassVar[dict[str, Any]] = {
        "type": "array",
        "items": {"type": ["string", "number", "boolean", "null"]},
    }

    def validate_value(self, value: Any) -> list[StaticListItem]:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise InvalidParameterValueError(f"not a JSON array: {e.msg}") from e
        if isinstance(value, tuple):
            value = list(value)
        validate_json_by_schema(value, self.item_schema)
        return value


ParameterType = Annotated[
    ValidUrlParameterType | StaticListParameterType,
    Field(discriminator="type_name"),
]

PARAMETER_TYPE_VARIANTS: dict[str, type[ParameterTypeBase]] = {
    variant.model_fields["type_name"].default: variant
    for variant in get_args(get_args(ParameterType)[0])
}


def decode_parameter_type(type_name: str) -> ParameterTypeBase:
    """Build the variant whose stored name is ``type_name``.

    Raises:
        UnrecognizedParameterTypeError: If no variant has that name
    """
    variant = PARAMETER_TYPE_VARIANTS.get(type_name)
    if variant is None:
        raise UnrecognizedParameterTypeError(type_name)
    return variant()


def encode_parameter_type(parameter_type: ParameterTypeBase) -> str:
    """Return the stored name of a variant."""
    return parameter_type.type_name


__all__ = [
    "PARAMETER_TYPE_VARIANTS",
    "ParameterType",
    "ParameterTypeBase",
    "StaticListParameterType",
    "ValidUrlParameterType",
    "decode_parameter_type",
    "encode_parameter_type",
]
