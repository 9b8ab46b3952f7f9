"""
JSON validation utilities for fspec.

This module provides utilities for validating JSON data against JSON schemas.
"""

from typing import Any

from jsonschema import SchemaError, ValidationError, validate

from ..exceptions import InvalidParameterValueError
from ..utils.logger import logger


def validate_json_by_schema(json_data: Any, json_schema: dict[str, Any]) -> bool:
    """
    Validate JSON data against a JSON schema.

    Args:
        json_data: The data to validate
        json_schema: The schema to validate against

    Returns:
        True if validation succeeds

    Raises:
        InvalidParameterValueError: If validation fails
        SchemaError: If the schema itself is invalid
    """
    try:
        validate(instance=json_data, schema=json_schema)
    except ValidationError as e:
        logger.debug(f"JSON validation error: {e.message}")
        raise InvalidParameterValueError(e.message) from e
    except SchemaError as e:
        logger.error(f"JSON schema error: {e}")
        raise
    return True
