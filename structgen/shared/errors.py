"""Custom exceptions for struct generation."""

from __future__ import annotations


class StructgenError(Exception):
    """Base exception for every failure that aborts a generation run."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        full_message = f"{message}" if not source else f"[{source}] {message}"
        super().__init__(full_message)


class UnsupportedTypeError(StructgenError):
    """Raised when a column's catalog data type has no Go mapping."""

    def __init__(
        self,
        table_name: str,
        column_name: str,
        data_type: str,
        source: str | None = None,
    ) -> None:
        self.table_name = table_name
        self.column_name = column_name
        self.data_type = data_type
        super().__init__(
            f"No compatible datatype for {table_name}.{column_name} found "
            f"('{data_type}')",
            source,
        )

    @property
    def qualified_name(self) -> str:
        return f"{self.table_name}.{self.column_name}"


class SchemaAccessError(StructgenError):
    """Raised when column metadata cannot be read from its source."""


class OutputSinkError(StructgenError):
    """Raised when the output destination cannot be created or written."""

    def __init__(
        self,
        message: str,
        destination: str,
    ) -> None:
        self.destination = destination
        super().__init__(message, destination)


class ConfigError(StructgenError):
    """Raised when a configuration file cannot be loaded."""
