"""Tests for schema models and error reporting."""

import pytest

from sql_generate.database.models import Column, Table, Schema, GenerationResult
from sql_generate.errors import ConfigurationError, NameCollisionError


class TestSchema:
    """Test table lookup and serialization."""

    def test_lookup_by_raw_name(self, sample_schema):
        assert sample_schema["foo"].name == "foo"
        assert "bar" in sample_schema
        assert "baz" not in sample_schema

    def test_missing_table(self, sample_schema):
        with pytest.raises(KeyError):
            sample_schema["baz"]

    def test_order_preserved(self, sample_schema):
        assert [table.name for table in sample_schema] == ["bar", "foo"]
        assert list(sample_schema.to_dict()) == ["bar", "foo"]

    def test_column_count(self, sample_schema):
        assert len(sample_schema) == 2
        assert sample_schema.column_count() == 5

    def test_with_tables_is_a_copy(self, sample_schema):
        trimmed = sample_schema.with_tables([sample_schema["bar"]])

        assert trimmed.table_names() == ["bar"]
        assert trimmed.name == sample_schema.name
        assert sample_schema.table_names() == ["bar", "foo"]

    def test_lists_become_tuples(self):
        table = Table(name="t", property="t", columns=[Column(name="id", property="id", type="int")])

        assert isinstance(table.columns, tuple)
        assert isinstance(Schema(tables=[table]).tables, tuple)

    def test_table_to_dict(self, sample_schema, expected_foo_columns):
        assert sample_schema["foo"].to_dict() == {
            "name": "foo",
            "property": "foo",
            "columns": expected_foo_columns,
        }


class TestColumn:
    """Test column helpers."""

    def test_describe_type(self):
        assert Column(name="a", property="a", type="varchar", char_length=30).describe_type() == "varchar(30)"
        assert Column(name="a", property="a", type="int").describe_type() == "int"

    def test_get_column(self, sample_schema):
        assert sample_schema["foo"].get_column("field_1").char_length == 30
        assert sample_schema["foo"].get_column("nope") is None


class TestGenerationResult:
    """Test result shape."""

    def test_combined(self, sample_schema):
        result = GenerationResult(tables=sample_schema, buffer="x = 1\n")

        assert not result.is_modular
        assert result.to_dict()["buffer"] == "x = 1\n"

    def test_modular(self, sample_schema):
        result = GenerationResult(tables=sample_schema, buffer={"__init__": ""})

        assert result.is_modular


class TestErrors:
    """Test structured error reporting."""

    def test_to_dict(self):
        error = ConfigurationError("dialect is required", details={"field": "dialect"})

        assert error.to_dict() == {
            "code": "CONFIGURATION_ERROR",
            "message": "dialect is required",
            "details": {"field": "dialect"},
        }
        assert str(error) == "dialect is required"

    def test_name_collision(self):
        error = NameCollisionError("fooBar", ["foo_bar", "fooBar"], table="t")

        assert error.code == "NAME_COLLISION_ERROR"
        assert error.details["names"] == ["foo_bar", "fooBar"]
        assert "table 't'" in error.message
