"""Shared pytest fixtures for sql-generate tests."""

from datetime import datetime

import pytest

from sql_generate.database.models import Schema, Table, Column


@pytest.fixture
def fixed_now():
    """A fixed timestamp for the banner comment."""
    return datetime(2026, 10, 18, 12, 0, 0)


@pytest.fixture
def sample_schema():
    """Normalized schema for the foo/bar test database (properties unresolved)."""
    return Schema(
        name="node_sql_generate",
        tables=[
            Table(
                name="bar",
                property="bar",
                columns=[
                    Column(name="id", property="id", type="int", char_length=None, nullable=False),
                    Column(name="foo_id", property="foo_id", type="int", char_length=None, nullable=False),
                ],
            ),
            Table(
                name="foo",
                property="foo",
                columns=[
                    Column(name="id", property="id", type="int", char_length=None, nullable=False),
                    Column(name="field_1", property="field_1", type="varchar", char_length=30, nullable=True),
                    Column(name="foo_bar_baz", property="foo_bar_baz", type="char", char_length=255, nullable=True),
                ],
            ),
        ],
    )


@pytest.fixture
def expected_foo_columns():
    """Column dicts for table foo with default options."""
    return [
        {"name": "id", "property": "id", "type": "int", "charLength": None, "nullable": False},
        {"name": "field_1", "property": "field_1", "type": "varchar", "charLength": 30, "nullable": True},
        {"name": "foo_bar_baz", "property": "foo_bar_baz", "type": "char", "charLength": 255, "nullable": True},
    ]


@pytest.fixture
def expected_defaults():
    """Generated code for the foo/bar database with default options, banner removed."""
    return '''import sqlalchemy as sa

metadata = sa.MetaData()


# SQL definition for bar
bar = sa.Table(
    'bar',
    metadata,
    sa.Column('id', key='id'),  # int, not null
    sa.Column('foo_id', key='foo_id'),  # int, not null
)


# SQL definition for foo
foo = sa.Table(
    'foo',
    metadata,
    sa.Column('id', key='id'),  # int, not null
    sa.Column('field_1', key='field_1'),  # varchar(30), nullable
    sa.Column('foo_bar_baz', key='foo_bar_baz'),  # char(255), nullable
)
'''


@pytest.fixture
def expected_omit_comments():
    """Generated code with omitComments, which also drops the banner."""
    return '''import sqlalchemy as sa

metadata = sa.MetaData()


bar = sa.Table(
    'bar',
    metadata,
    sa.Column('id', key='id'),
    sa.Column('foo_id', key='foo_id'),
)


foo = sa.Table(
    'foo',
    metadata,
    sa.Column('id', key='id'),
    sa.Column('field_1', key='field_1'),
    sa.Column('foo_bar_baz', key='foo_bar_baz'),
)
'''
