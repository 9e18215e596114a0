"""Dialect-specific mapping of native type names to the canonical vocabulary."""

import logging
from abc import ABC, abstractmethod
from typing import Dict

logger = logging.getLogger(__name__)

CANONICAL_TYPES = frozenset({
    "bigint", "binary", "bit", "blob", "bool", "char", "date", "datetime",
    "decimal", "double", "enum", "float", "int", "json", "mediumint", "money",
    "nchar", "ntext", "nvarchar", "real", "set", "smallint", "text", "time",
    "timestamp", "tinyint", "uuid", "varbinary", "varchar", "xml",
})


class TypeMapper(ABC):
    """Abstract base class for dialect type mapping."""

    # Native (lower-case) type name -> canonical type name
    TYPE_MAP: Dict[str, str] = {}

    @abstractmethod
    def to_canonical(self, db_type: str) -> str:
        """Convert a native type name to its canonical name."""
        pass

    def _lookup(self, db_type: str) -> str:
        native = " ".join(db_type.lower().split())
        canonical = self.TYPE_MAP.get(native)
        if canonical is None:
            logger.debug("No canonical mapping for %s type '%s', passing through", self.dialect, native)
            return native
        return canonical

    @property
    def dialect(self) -> str:
        return type(self).__name__.replace("TypeMapper", "").lower()


class MySQLTypeMapper(TypeMapper):
    """Type mapper for MySQL ``information_schema.columns.data_type``."""

    TYPE_MAP = {
        "tinyint": "tinyint",
        "smallint": "smallint",
        "mediumint": "mediumint",
        "int": "int",
        "integer": "int",
        "bigint": "bigint",
        "decimal": "decimal",
        "numeric": "decimal",
        "float": "float",
        "double": "double",
        "real": "double",
        "bit": "bit",
        "bool": "bool",
        "boolean": "bool",
        "char": "char",
        "varchar": "varchar",
        "tinytext": "text",
        "text": "text",
        "mediumtext": "text",
        "longtext": "text",
        "binary": "binary",
        "varbinary": "varbinary",
        "tinyblob": "blob",
        "blob": "blob",
        "mediumblob": "blob",
        "longblob": "blob",
        "date": "date",
        "time": "time",
        "datetime": "datetime",
        "timestamp": "timestamp",
        "year": "smallint",
        "enum": "enum",
        "set": "set",
        "json": "json",
    }

    def to_canonical(self, db_type: str) -> str:
        return self._lookup(db_type)


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL ``format_type()`` base names."""

    TYPE_MAP = {
        "smallint": "smallint",
        "integer": "int",
        "bigint": "bigint",
        "numeric": "decimal",
        "real": "real",
        "double precision": "double",
        "money": "money",
        "boolean": "bool",
        "character": "char",
        "character varying": "varchar",
        "text": "text",
        "bytea": "blob",
        "date": "date",
        "time without time zone": "time",
        "time with time zone": "time",
        "timestamp without time zone": "timestamp",
        "timestamp with time zone": "timestamp",
        "bit": "bit",
        "bit varying": "bit",
        "uuid": "uuid",
        "json": "json",
        "jsonb": "json",
        "xml": "xml",
    }

    def to_canonical(self, db_type: str) -> str:
        native = db_type.lower().strip()
        # int[] and friends keep their array suffix
        if native.endswith("[]"):
            return self._lookup(native[:-2]) + "[]"
        return self._lookup(native)


class MSSQLTypeMapper(TypeMapper):
    """Type mapper for SQL Server ``INFORMATION_SCHEMA.COLUMNS.DATA_TYPE``."""

    TYPE_MAP = {
        "tinyint": "tinyint",
        "smallint": "smallint",
        "int": "int",
        "bigint": "bigint",
        "decimal": "decimal",
        "numeric": "decimal",
        "money": "money",
        "smallmoney": "money",
        "float": "double",
        "real": "real",
        "bit": "bit",
        "char": "char",
        "varchar": "varchar",
        "text": "text",
        "nchar": "nchar",
        "nvarchar": "nvarchar",
        "ntext": "ntext",
        "binary": "binary",
        "varbinary": "varbinary",
        "image": "blob",
        "date": "date",
        "time": "time",
        "datetime": "datetime",
        "datetime2": "datetime",
        "smalldatetime": "datetime",
        "datetimeoffset": "datetime",
        "timestamp": "varbinary",
        "rowversion": "varbinary",
        "uniqueidentifier": "uuid",
        "xml": "xml",
    }

    def to_canonical(self, db_type: str) -> str:
        return self._lookup(db_type)
