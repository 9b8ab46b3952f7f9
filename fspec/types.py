"""Common type definitions for fspec.

Type aliases shared by the registry, models and services.
"""

from typing import Any, TypeAlias

# Registry seed rows: (parameter name, required, parameter type name)
CanonicalParameterRow: TypeAlias = tuple[str, bool, str]

# Parameter values keyed by parameter name
ParameterValues: TypeAlias = dict[str, Any]

# Literal scalars allowed inside a static list value
StaticListItem: TypeAlias = str | int | float | bool | None
