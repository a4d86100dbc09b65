"""Column metadata records and the schema snapshot loader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

import yaml

from .errors import SchemaAccessError


@dataclass(frozen=True, slots=True)
class ColumnMetadata:
    """One row of the schema catalog describing a single column."""

    table_name: str
    column_name: str
    is_nullable: str
    data_type: str
    character_maximum_length: int | None = None
    numeric_precision: int | None = None
    numeric_scale: int | None = None
    column_type: str = ""
    column_key: str = ""

    @property
    def nullable(self) -> bool:
        return self.is_nullable == "YES"


def load_schema(schema_path: Path) -> dict[str, Any]:
    """Load a schema snapshot from a YAML (or JSON) file.

    Args:
        schema_path: Path to the snapshot file.

    Returns:
        The parsed snapshot dictionary.

    Raises:
        SchemaAccessError: If the file cannot be read or parsed.
    """
    try:
        content = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaAccessError(
            f"Failed to read schema file: {e}", str(schema_path)
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SchemaAccessError(f"Invalid YAML: {e}", str(schema_path)) from e

    if not isinstance(data, dict):
        raise SchemaAccessError("Schema root must be a mapping", str(schema_path))

    return data


def _nullable_flag(value: Any) -> str:
    if isinstance(value, str):
        return "YES" if value.upper() == "YES" else "NO"
    return "YES" if value else "NO"


def columns_from_schema(
    data: dict[str, Any],
    source: str | None = None,
) -> list[ColumnMetadata]:
    """Flatten a snapshot's ``tables`` list into ordered column records.

    Tables keep their file order and columns keep their order within the
    table, so every table's rows stay contiguous.

    Raises:
        SchemaAccessError: If the snapshot is not shaped as expected.
    """
    tables = data.get("tables")
    if not isinstance(tables, list):
        raise SchemaAccessError("schema must provide a 'tables' list", source)

    def _iter_columns() -> Iterator[ColumnMetadata]:
        for table in tables:
            if not isinstance(table, dict) or "name" not in table:
                raise SchemaAccessError("every table needs a 'name'", source)
            table_name = str(table["name"])
            columns = table.get("columns", [])
            if not isinstance(columns, list):
                raise SchemaAccessError(
                    f"table '{table_name}' must provide a 'columns' list", source
                )
            for column in columns:
                if not isinstance(column, dict):
                    raise SchemaAccessError(
                        f"table '{table_name}' has a malformed column", source
                    )
                try:
                    column_name = str(column["name"])
                    data_type = str(column["data_type"])
                except KeyError as e:
                    raise SchemaAccessError(
                        f"column in table '{table_name}' is missing {e}", source
                    ) from e
                yield ColumnMetadata(
                    table_name=table_name,
                    column_name=column_name,
                    is_nullable=_nullable_flag(column.get("nullable", False)),
                    data_type=data_type,
                    character_maximum_length=column.get("character_maximum_length"),
                    numeric_precision=column.get("numeric_precision"),
                    numeric_scale=column.get("numeric_scale"),
                    column_type=str(column.get("column_type", data_type)),
                    column_key=str(column.get("column_key", "")),
                )

    return list(_iter_columns())


def load_columns(schema_path: Path) -> list[ColumnMetadata]:
    """Load ordered column metadata from a snapshot file."""
    return columns_from_schema(load_schema(schema_path), str(schema_path))
