"""Core application components."""

from fpdb.core.config import Settings, get_settings, settings
from fpdb.core.exceptions import (
    ConfigurationError,
    FieldRegistryError,
    FpdbException,
    QueryExecutionError,
    RowDecodeError,
)

__all__ = [
    # Config
    "Settings",
    "settings",
    "get_settings",
    # Exceptions
    "FpdbException",
    "ConfigurationError",
    "FieldRegistryError",
    "QueryExecutionError",
    "RowDecodeError",
]
