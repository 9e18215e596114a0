"""MySQL dialect adapter."""

from typing import Any, Optional, Sequence, Tuple

from .base import DialectAdapter
from .models import RawColumn
from .type_mappers import MySQLTypeMapper


class MySQLAdapter(DialectAdapter):
    """Reads ``information_schema.columns`` from MySQL.

    The database doubles as the schema; nullability arrives as 'YES'/'NO'.
    """

    DIALECT = "mysql"

    _type_mapper = MySQLTypeMapper()

    @property
    def type_mapper(self) -> MySQLTypeMapper:
        return self._type_mapper

    def _open_connection(self, database: str):
        try:
            import pymysql
        except ImportError:
            raise ImportError(
                "pymysql is required for MySQL. "
                "Install it with: pip install 'sql-generate[mysql]'"
            )

        return pymysql.connect(
            host=self.descriptor.host or "localhost",
            port=self.descriptor.port or 3306,
            user=self.descriptor.user,
            password=self.descriptor.password or "",
            database=database,
        )

    def resolve_schema(self, database: str, schema: Optional[str]) -> Optional[str]:
        return database

    def query(self, database: str, schema: Optional[str]) -> Tuple[str, tuple]:
        sql = """
            SELECT
                table_name,
                column_name,
                ordinal_position,
                data_type,
                character_maximum_length,
                is_nullable
            FROM information_schema.columns
            WHERE table_schema = %s
            ORDER BY table_name, ordinal_position
        """
        return sql, (database,)

    def to_raw_column(self, record: Sequence[Any]) -> RawColumn:
        return RawColumn(
            table_name=self._required(record, 0, "table name"),
            column_name=self._required(record, 1, "column name"),
            ordinal_position=int(self._required(record, 2, "ordinal position")),
            data_type=self._required(record, 3, "data type"),
            char_length=self._optional_int(record[4]),
            nullable=self._flag(record[5]),
        )
