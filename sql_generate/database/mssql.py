"""SQL Server dialect adapter."""

from typing import Any, Optional, Sequence, Tuple

from ..config import settings
from .base import DialectAdapter
from .models import RawColumn
from .type_mappers import MSSQLTypeMapper


class MSSQLAdapter(DialectAdapter):
    """Reads ``INFORMATION_SCHEMA.COLUMNS`` from SQL Server.

    ``varchar(max)`` reports a length of -1, which is kept as is.
    """

    DIALECT = "mssql"
    DEFAULT_SCHEMA = settings.default_mssql_schema

    _type_mapper = MSSQLTypeMapper()

    @property
    def type_mapper(self) -> MSSQLTypeMapper:
        return self._type_mapper

    def _open_connection(self, database: str):
        try:
            import pymssql
        except ImportError:
            raise ImportError(
                "pymssql is required for SQL Server. "
                "Install it with: pip install 'sql-generate[mssql]'"
            )

        return pymssql.connect(
            server=self.descriptor.host or "localhost",
            port=str(self.descriptor.port or 1433),
            user=self.descriptor.user,
            password=self.descriptor.password,
            database=database,
        )

    def query(self, database: str, schema: Optional[str]) -> Tuple[str, tuple]:
        sql = """
            SELECT
                TABLE_NAME,
                COLUMN_NAME,
                ORDINAL_POSITION,
                DATA_TYPE,
                CHARACTER_MAXIMUM_LENGTH,
                IS_NULLABLE
            FROM INFORMATION_SCHEMA.COLUMNS
            WHERE TABLE_CATALOG = %s
              AND TABLE_SCHEMA = %s
            ORDER BY TABLE_NAME, ORDINAL_POSITION
        """
        return sql, (database, self.resolve_schema(database, schema))

    def to_raw_column(self, record: Sequence[Any]) -> RawColumn:
        return RawColumn(
            table_name=self._required(record, 0, "table name"),
            column_name=self._required(record, 1, "column name"),
            ordinal_position=int(self._required(record, 2, "ordinal position")),
            data_type=self._required(record, 3, "data type"),
            char_length=self._optional_int(record[4]),
            nullable=self._flag(record[5]),
        )
