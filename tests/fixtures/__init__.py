"""Test fixtures for sql-generate."""

from .output import remove_banner
from .fake_db import (
    create_fake_connection,
    create_failing_connection,
    MYSQL_RECORDS,
    PG_RECORDS,
    MSSQL_RECORDS,
    RECORDS_BY_DIALECT,
)

__all__ = [
    "remove_banner",
    "create_fake_connection",
    "create_failing_connection",
    "MYSQL_RECORDS",
    "PG_RECORDS",
    "MSSQL_RECORDS",
    "RECORDS_BY_DIALECT",
]
