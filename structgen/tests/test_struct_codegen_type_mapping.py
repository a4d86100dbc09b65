import pytest

from structgen.shared.errors import UnsupportedTypeError
from structgen.shared.schema_loader import ColumnMetadata
from structgen.struct_codegen.type_mapping import (
    DEFAULT_GO_TYPES,
    SQL_IMPORT,
    TIME_IMPORT,
    map_type,
)


def _column(data_type, nullable=False, table="items", name="value"):
    return ColumnMetadata(table, name, "YES" if nullable else "NO", data_type)


class TestMapType:
    @pytest.mark.parametrize(
        "data_type,nullable,expected",
        [
            ("varchar", False, ("string", None)),
            ("enum", False, ("string", None)),
            ("text", False, ("string", None)),
            ("longtext", False, ("string", None)),
            ("mediumtext", False, ("string", None)),
            ("varchar", True, ("sql.NullString", SQL_IMPORT)),
            ("mediumtext", True, ("sql.NullString", SQL_IMPORT)),
            ("blob", False, ("[]byte", None)),
            ("mediumblob", False, ("[]byte", None)),
            ("longblob", True, ("[]byte", None)),
            ("date", False, ("time.Time", TIME_IMPORT)),
            ("time", False, ("time.Time", TIME_IMPORT)),
            ("datetime", True, ("time.Time", TIME_IMPORT)),
            ("timestamp", True, ("time.Time", TIME_IMPORT)),
            ("tinyint", False, ("int64", None)),
            ("smallint", False, ("int64", None)),
            ("int", False, ("int64", None)),
            ("mediumint", True, ("sql.NullInt64", SQL_IMPORT)),
            ("bigint", True, ("sql.NullInt64", SQL_IMPORT)),
            ("float", False, ("float64", None)),
            ("decimal", False, ("float64", None)),
            ("double", True, ("sql.NullFloat64", SQL_IMPORT)),
        ],
    )
    def test_map_type(self, data_type, nullable, expected):
        assert map_type(_column(data_type, nullable)) == expected

    def test_every_mapped_type_is_deterministic(self):
        for data_type in DEFAULT_GO_TYPES:
            for nullable in (False, True):
                column = _column(data_type, nullable)
                first = map_type(column)
                assert first[0]
                assert map_type(column) == first

    def test_sql_import_value(self):
        assert SQL_IMPORT == "database/sql"
        assert TIME_IMPORT == "time"

    @pytest.mark.parametrize("data_type", ["json", "geometry", "bit", "VARCHAR", ""])
    def test_unsupported_type(self, data_type):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            map_type(_column(data_type, table="users", name="extra"))

        assert exc_info.value.qualified_name == "users.extra"
        assert exc_info.value.data_type == data_type
        assert "users.extra" in str(exc_info.value)

    def test_unsupported_nullable_type(self):
        with pytest.raises(UnsupportedTypeError):
            map_type(_column("set", nullable=True))
