"""Tests for schema normalization and type mapping."""

import pytest

from sql_generate.database import ADAPTERS, normalize
from sql_generate.database.models import RawColumn
from sql_generate.database.type_mappers import (
    MySQLTypeMapper,
    PostgresTypeMapper,
    MSSQLTypeMapper,
)
from sql_generate.errors import NormalizationError
from tests.fixtures import RECORDS_BY_DIALECT


def raw(table, column, ordinal, data_type="int", char_length=None, nullable=True):
    return RawColumn(
        table_name=table,
        column_name=column,
        ordinal_position=ordinal,
        data_type=data_type,
        char_length=char_length,
        nullable=nullable,
    )


class TestNormalize:
    """Test grouping, ordering and validation of raw rows."""

    def test_groups_in_discovery_order(self):
        rows = [raw("zeta", "id", 1), raw("alpha", "id", 1), raw("zeta", "name", 2, "varchar", 10)]

        schema = normalize(rows, MySQLTypeMapper())

        assert schema.table_names() == ["zeta", "alpha"]
        assert [c.name for c in schema["zeta"].columns] == ["id", "name"]

    def test_sorts_columns_by_ordinal(self):
        rows = [raw("t", "c", 3), raw("t", "a", 1), raw("t", "b", 2)]

        schema = normalize(rows, MySQLTypeMapper())

        assert [c.name for c in schema["t"].columns] == ["a", "b", "c"]

    def test_properties_start_as_raw_names(self):
        schema = normalize([raw("my_table", "my_column", 1)], MySQLTypeMapper())

        assert schema["my_table"].property == "my_table"
        assert schema["my_table"].columns[0].property == "my_column"

    def test_records_schema_name(self):
        schema = normalize([raw("t", "id", 1)], MySQLTypeMapper(), schema_name="shop")

        assert schema.name == "shop"

    def test_nullable_is_strict_bool(self):
        rows = [raw("t", "a", 1, nullable=1), raw("t", "b", 2, nullable=0)]

        columns = normalize(rows, MySQLTypeMapper())["t"].columns

        assert columns[0].nullable is True
        assert columns[1].nullable is False

    def test_char_length_preserved(self):
        rows = [raw("t", "a", 1, "varchar", -1), raw("t", "b", 2, "int", None)]

        columns = normalize(rows, MSSQLTypeMapper())["t"].columns

        assert columns[0].char_length == -1
        assert columns[1].char_length is None

    def test_empty_input(self):
        with pytest.raises(NormalizationError):
            normalize([], MySQLTypeMapper())

    def test_missing_table_name(self):
        with pytest.raises(NormalizationError) as exc_info:
            normalize([raw("", "id", 1)], MySQLTypeMapper())

        assert "missing a table name" in exc_info.value.message

    def test_missing_column_name(self):
        with pytest.raises(NormalizationError) as exc_info:
            normalize([raw("t", None, 1)], MySQLTypeMapper())

        assert exc_info.value.details["table_name"] == "t"

    def test_duplicate_column(self):
        with pytest.raises(NormalizationError) as exc_info:
            normalize([raw("t", "id", 1), raw("t", "id", 2)], MySQLTypeMapper())

        assert "Duplicate column 'id'" in exc_info.value.message

    def test_duplicate_ordinal(self):
        with pytest.raises(NormalizationError):
            normalize([raw("t", "a", 1), raw("t", "b", 1)], MySQLTypeMapper())


class TestDialectEquivalence:
    """The same physical schema normalizes identically for every dialect."""

    @pytest.fixture
    def canonical(self):
        def build(dialect):
            adapter = ADAPTERS[dialect]()
            rows = [adapter.to_raw_column(record) for record in RECORDS_BY_DIALECT[dialect]]
            return normalize(rows, adapter.type_mapper)
        return build

    @pytest.mark.parametrize("dialect", ["mysql", "pg", "mssql"])
    def test_matches_fixture(self, canonical, dialect, expected_foo_columns):
        schema = canonical(dialect)

        assert schema.table_names() == ["bar", "foo"]
        assert [c.to_dict() for c in schema["foo"].columns] == expected_foo_columns

    def test_all_dialects_equal(self, canonical):
        assert canonical("mysql") == canonical("pg") == canonical("mssql")


class TestTypeMappers:
    """Test native to canonical type mapping."""

    @pytest.mark.parametrize("native,canonical", [
        ("int", "int"),
        ("INTEGER", "int"),
        ("varchar", "varchar"),
        ("longtext", "text"),
        ("tinyint", "tinyint"),
        ("datetime", "datetime"),
        ("json", "json"),
    ])
    def test_mysql(self, native, canonical):
        assert MySQLTypeMapper().to_canonical(native) == canonical

    @pytest.mark.parametrize("native,canonical", [
        ("integer", "int"),
        ("character varying", "varchar"),
        ("character", "char"),
        ("double precision", "double"),
        ("timestamp without time zone", "timestamp"),
        ("boolean", "bool"),
        ("jsonb", "json"),
        ("integer[]", "int[]"),
    ])
    def test_postgres(self, native, canonical):
        assert PostgresTypeMapper().to_canonical(native) == canonical

    @pytest.mark.parametrize("native,canonical", [
        ("int", "int"),
        ("nvarchar", "nvarchar"),
        ("uniqueidentifier", "uuid"),
        ("datetime2", "datetime"),
        ("float", "double"),
    ])
    def test_mssql(self, native, canonical):
        assert MSSQLTypeMapper().to_canonical(native) == canonical

    def test_unknown_type_passes_through(self):
        assert PostgresTypeMapper().to_canonical("  Geometry ") == "geometry"
