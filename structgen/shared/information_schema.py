"""Reads column metadata from a live MySQL ``information_schema``."""

from __future__ import annotations

from typing import Final

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from .config import ConnectionSettings
from .errors import SchemaAccessError
from .schema_loader import ColumnMetadata

DRIVER: Final[str] = "mysql+mysqlconnector"
CATALOG_DATABASE: Final[str] = "information_schema"

COLUMNS_QUERY: Final = text(
    "SELECT TABLE_NAME, COLUMN_NAME, IS_NULLABLE, DATA_TYPE, "
    "CHARACTER_MAXIMUM_LENGTH, NUMERIC_PRECISION, NUMERIC_SCALE, COLUMN_TYPE, "
    "COLUMN_KEY FROM COLUMNS WHERE TABLE_SCHEMA = :schema "
    "ORDER BY TABLE_NAME, ORDINAL_POSITION"
)


def build_url(settings: ConnectionSettings) -> URL:
    """Build the connection URL for the schema catalog.

    Host and port are only used when both are set; otherwise the driver
    connects to its local default.
    """
    use_tcp = bool(settings.host) and settings.port > 0
    return URL.create(
        DRIVER,
        username=settings.db_user,
        password=settings.db_password,
        host=settings.host if use_tcp else None,
        port=settings.port if use_tcp else None,
        database=CATALOG_DATABASE,
    )


def fetch_columns(
    settings: ConnectionSettings,
    engine: Engine | None = None,
) -> list[ColumnMetadata]:
    """Fetch every column of ``settings.db_name``, ordered by table then position.

    Args:
        settings: Connection settings; ``db_name`` selects the schema.
        engine: Engine to use instead of one built from ``settings``.
            A caller-supplied engine is not disposed here.

    Returns:
        Column metadata with each table's rows contiguous.

    Raises:
        SchemaAccessError: If connecting, querying or reading rows fails.
    """
    owned = engine is None
    if engine is None:
        engine = create_engine(build_url(settings), poolclass=NullPool)

    try:
        with engine.connect() as conn:
            result = conn.execute(COLUMNS_QUERY, {"schema": settings.db_name})
            return [
                ColumnMetadata(
                    table_name=row[0],
                    column_name=row[1],
                    is_nullable=row[2],
                    data_type=row[3],
                    character_maximum_length=row[4],
                    numeric_precision=row[5],
                    numeric_scale=row[6],
                    column_type=row[7] or "",
                    column_key=row[8] or "",
                )
                for row in result
            ]
    except SQLAlchemyError as e:
        raise SchemaAccessError(
            f"Failed to read columns of schema '{settings.db_name}': {e}",
            CATALOG_DATABASE,
        ) from e
    finally:
        if owned:
            engine.dispose()
