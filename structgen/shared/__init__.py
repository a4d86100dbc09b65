"""Shared utilities for struct generation."""

from .schema_loader import (
    ColumnMetadata,
    load_schema,
    load_columns,
    columns_from_schema,
)
from .naming import (
    format_name,
)
from .config import (
    Configuration,
    ConnectionSettings,
    GenerationConfig,
    load_config,
)
from .errors import (
    StructgenError,
    UnsupportedTypeError,
    SchemaAccessError,
    OutputSinkError,
    ConfigError,
)

__all__ = [
    # Column metadata
    "ColumnMetadata",
    "load_schema",
    "load_columns",
    "columns_from_schema",
    # Naming utilities
    "format_name",
    # Configuration
    "Configuration",
    "ConnectionSettings",
    "GenerationConfig",
    "load_config",
    # Errors
    "StructgenError",
    "UnsupportedTypeError",
    "SchemaAccessError",
    "OutputSinkError",
    "ConfigError",
]
