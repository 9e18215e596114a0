"""PostgreSQL dialect adapter."""

import re
from typing import Any, Optional, Sequence, Tuple

from ..config import settings
from .base import DialectAdapter
from .models import RawColumn
from .type_mappers import PostgresTypeMapper

# format_type() output: base name, optional modifiers, optional suffix,
# e.g. "character varying(30)", "numeric(10,2)", "timestamp(3) with time zone"
FORMATTED_TYPE = re.compile(r"^(?P<base>[^(]+)(?:\((?P<args>[^)]*)\))?(?P<suffix>.*)$")

CHARACTER_TYPES = {"character", "character varying"}


def split_formatted_type(formatted: str) -> Tuple[str, Optional[int]]:
    """Split a format_type() string into its base type and character length.

    >>> split_formatted_type("character varying(30)")
    ('character varying', 30)
    >>> split_formatted_type("numeric(10,2)")
    ('numeric', None)
    """
    match = FORMATTED_TYPE.match(formatted.strip())
    if not match:
        return formatted.strip(), None

    base = " ".join((match.group("base") + match.group("suffix")).split())
    args = match.group("args")
    if base in CHARACTER_TYPES and args and args.strip().isdigit():
        return base, int(args)
    return base, None


class PostgresAdapter(DialectAdapter):
    """Reads column metadata from ``pg_catalog``.

    The length is embedded in the formatted type string and nullability is
    the boolean ``attnotnull`` flag.
    """

    DIALECT = "pg"
    DEFAULT_SCHEMA = settings.default_pg_schema

    _type_mapper = PostgresTypeMapper()

    @property
    def type_mapper(self) -> PostgresTypeMapper:
        return self._type_mapper

    def _open_connection(self, database: str):
        try:
            import psycopg2
        except ImportError:
            raise ImportError(
                "psycopg2 is required for PostgreSQL. "
                "Install it with: pip install 'sql-generate[pg]'"
            )

        return psycopg2.connect(
            host=self.descriptor.host or "localhost",
            port=self.descriptor.port or 5432,
            user=self.descriptor.user,
            password=self.descriptor.password,
            dbname=database,
        )

    def query(self, database: str, schema: Optional[str]) -> Tuple[str, tuple]:
        sql = """
            SELECT
                c.relname,
                a.attname,
                a.attnum,
                format_type(a.atttypid, a.atttypmod),
                a.attnotnull
            FROM pg_catalog.pg_attribute a
            JOIN pg_catalog.pg_class c ON c.oid = a.attrelid
            JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
            WHERE n.nspname = %s
              AND c.relkind IN ('r', 'v', 'm', 'p')
              AND a.attnum > 0
              AND NOT a.attisdropped
            ORDER BY c.relname, a.attnum
        """
        return sql, (self.resolve_schema(database, schema),)

    def to_raw_column(self, record: Sequence[Any]) -> RawColumn:
        data_type, char_length = split_formatted_type(self._required(record, 3, "data type"))
        return RawColumn(
            table_name=self._required(record, 0, "table name"),
            column_name=self._required(record, 1, "column name"),
            ordinal_position=int(self._required(record, 2, "ordinal position")),
            data_type=data_type,
            char_length=char_length,
            nullable=not record[4],
        )
