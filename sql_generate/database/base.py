"""Abstract base class for dialect adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from ..dsn import ConnectionDescriptor
from ..errors import IntrospectionError, NormalizationError
from .models import RawColumn
from .type_mappers import TypeMapper

logger = logging.getLogger(__name__)


class DialectAdapter(ABC):
    """Reads column metadata for one database/schema from a live connection.

    Subclasses issue the dialect's introspection query and convert each
    record into the uniform RawColumn shape the normalizer consumes.
    An already open DB-API connection may be passed in; it is then left
    open on close().
    """

    DIALECT: str = ""
    DEFAULT_SCHEMA: Optional[str] = None

    def __init__(
        self,
        descriptor: Optional[ConnectionDescriptor] = None,
        connection: Any = None,
    ):
        self.descriptor = descriptor or ConnectionDescriptor(dialect=self.DIALECT)
        self._connection = connection
        self._owns_connection = connection is None

    @property
    @abstractmethod
    def type_mapper(self) -> TypeMapper:
        """Mapper from this dialect's native types to canonical names."""
        pass

    @abstractmethod
    def _open_connection(self, database: str) -> Any:
        """Open a driver connection to the given database."""
        pass

    @abstractmethod
    def query(self, database: str, schema: Optional[str]) -> Tuple[str, tuple]:
        """Return the introspection SQL and its bound parameters."""
        pass

    @abstractmethod
    def to_raw_column(self, record: Sequence[Any]) -> RawColumn:
        """Convert one result record into a RawColumn."""
        pass

    def resolve_schema(self, database: str, schema: Optional[str]) -> Optional[str]:
        """Name of the schema the tables live in (used for qualification)."""
        return schema or self.DEFAULT_SCHEMA or database

    def connect(self, database: str):
        """Establish (or reuse) the connection."""
        if self._connection is None:
            logger.debug("Connecting to %s database '%s' on %s", self.DIALECT, database, self.descriptor.host)
            self._connection = self._open_connection(database)
        return self._connection

    def close(self):
        """Close the connection if this adapter opened it."""
        if self._connection is not None and self._owns_connection:
            self._connection.close()
            self._connection = None

    def fetch_columns(self, database: str, schema: Optional[str] = None) -> List[RawColumn]:
        """Run the introspection query and return uniform raw rows.

        Raises:
            IntrospectionError: when the query returns no rows
            NormalizationError: when a record lacks its table or column name
        """
        conn = self.connect(database)
        sql, params = self.query(database, schema)
        cursor = conn.cursor()
        try:
            cursor.execute(sql, params)
            records = cursor.fetchall()
        finally:
            cursor.close()

        if not records:
            raise IntrospectionError(
                f"No tables found in {self.DIALECT} database '{database}'"
                + (f" schema '{schema}'" if schema else ""),
                details={"dialect": self.DIALECT, "database": database, "schema": schema},
            )

        logger.debug("Fetched %d column rows from %s", len(records), self.DIALECT)
        return [self.to_raw_column(record) for record in records]

    def _required(self, record: Sequence[Any], index: int, field_name: str) -> str:
        value = record[index] if len(record) > index else None
        if value is None or value in ("", b""):
            raise NormalizationError(
                f"{self.DIALECT} introspection row is missing {field_name}",
                details={"record": list(record), "field": field_name},
            )
        # MySQL 8 may hand back catalog strings as bytes
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    @staticmethod
    def _flag(value: Any) -> bool:
        """Interpret an information_schema 'YES'/'NO' flag."""
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return str(value).strip().upper() == "YES"

    @staticmethod
    def _optional_int(value: Any) -> Optional[int]:
        if value is None:
            return None
        return int(value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
