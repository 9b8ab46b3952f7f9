"""
fspec: catalog of pipeline types and their typed parameter schemas.

The catalog is projected from a fixed, code-defined registry into a local
SQLite database and read back from there.
"""

from .services.catalog_service import FspecCommand, execute_command, initialize, list_available_types
from .settings import Settings, get_settings

__all__ = [
    "FspecCommand",
    "Settings",
    "execute_command",
    "get_settings",
    "initialize",
    "list_available_types",
]
