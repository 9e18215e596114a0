"""Database introspection module for sql-generate.

This module provides dialect adapters for MySQL, PostgreSQL and SQL Server
and the normalizer that turns their rows into one canonical schema model.
"""

from typing import Any, Dict, Optional, Type

from ..dsn import ConnectionDescriptor
from .models import RawColumn, Column, Table, Schema, GenerationResult
from .base import DialectAdapter
from .normalizer import normalize
from .type_mappers import TypeMapper, MySQLTypeMapper, PostgresTypeMapper, MSSQLTypeMapper
from .mysql import MySQLAdapter
from .postgres import PostgresAdapter
from .mssql import MSSQLAdapter

ADAPTERS: Dict[str, Type[DialectAdapter]] = {
    MySQLAdapter.DIALECT: MySQLAdapter,
    PostgresAdapter.DIALECT: PostgresAdapter,
    MSSQLAdapter.DIALECT: MSSQLAdapter,
}


def get_adapter(
    dialect: str,
    descriptor: Optional[ConnectionDescriptor] = None,
    connection: Any = None,
) -> DialectAdapter:
    """Create the adapter registered for a dialect."""
    return ADAPTERS[dialect](descriptor=descriptor, connection=connection)


__all__ = [
    # Data models
    "RawColumn",
    "Column",
    "Table",
    "Schema",
    "GenerationResult",
    # Adapters
    "DialectAdapter",
    "MySQLAdapter",
    "PostgresAdapter",
    "MSSQLAdapter",
    "ADAPTERS",
    "get_adapter",
    # Normalization
    "normalize",
    "TypeMapper",
    "MySQLTypeMapper",
    "PostgresTypeMapper",
    "MSSQLTypeMapper",
]
