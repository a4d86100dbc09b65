"""Maps MySQL catalog data types to Go types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from structgen.shared import ColumnMetadata, UnsupportedTypeError

SQL_IMPORT: Final[str] = "database/sql"
TIME_IMPORT: Final[str] = "time"


@dataclass(frozen=True, slots=True)
class GoType:
    """Go rendering of one family of catalog data types.

    ``nullable_type`` is what a nullable column gets; families without a
    wrapper reuse ``type_name``. ``nullable_import`` is only required when the
    wrapper is used, ``import_path`` always.
    """

    type_name: str
    nullable_type: str
    import_path: str | None = None
    nullable_import: str | None = None


_STRING = GoType("string", "sql.NullString", nullable_import=SQL_IMPORT)
_BYTES = GoType("[]byte", "[]byte")
_TIME = GoType("time.Time", "time.Time", import_path=TIME_IMPORT)
_INT = GoType("int64", "sql.NullInt64", nullable_import=SQL_IMPORT)
_FLOAT = GoType("float64", "sql.NullFloat64", nullable_import=SQL_IMPORT)

# Type mappings from catalog data types to Go types
DEFAULT_GO_TYPES: Final[dict[str, GoType]] = {
    "varchar": _STRING,
    "enum": _STRING,
    "text": _STRING,
    "longtext": _STRING,
    "mediumtext": _STRING,
    "blob": _BYTES,
    "mediumblob": _BYTES,
    "longblob": _BYTES,
    "date": _TIME,
    "time": _TIME,
    "datetime": _TIME,
    "timestamp": _TIME,
    "tinyint": _INT,
    "smallint": _INT,
    "int": _INT,
    "mediumint": _INT,
    "bigint": _INT,
    "float": _FLOAT,
    "decimal": _FLOAT,
    "double": _FLOAT,
}


def map_type(column: ColumnMetadata) -> tuple[str, str | None]:
    """Resolve the Go type for a column.

    Args:
        column: Column metadata from the schema catalog.

    Returns:
        The Go type and the import it needs, or None when it needs none.

    Raises:
        UnsupportedTypeError: If no type mapping exists.
    """
    go_type = DEFAULT_GO_TYPES.get(column.data_type)
    if go_type is None:
        raise UnsupportedTypeError(
            column.table_name,
            column.column_name,
            column.data_type,
        )

    if column.nullable:
        return go_type.nullable_type, go_type.import_path or go_type.nullable_import
    return go_type.type_name, go_type.import_path
