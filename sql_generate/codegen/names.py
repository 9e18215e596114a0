"""Derives code-safe property names for tables and columns."""

import keyword
import logging
import re
from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

from ..database.models import Schema, Table
from ..errors import NameCollisionError

logger = logging.getLogger(__name__)

# Module level names used by the generated code
RESERVED_TABLE_NAMES = frozenset({"sa", "metadata", "__init__"})

NON_WORD = re.compile(r"\W", re.UNICODE)
CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def camelize(name: str) -> str:
    """Convert a separated identifier to camelCase.

    Segments are split on underscores and on lower-to-upper case boundaries.
    The first segment is lower-cased and every later segment gets an upper-case
    first letter; single-segment names come back unchanged. Leading
    underscores are kept.

    >>> camelize("foo_bar_baz")
    'fooBarBaz'
    >>> camelize("field_1")
    'field1'
    """
    stripped = name.lstrip("_")
    prefix = name[:len(name) - len(stripped)]

    segments = [
        segment
        for part in stripped.split("_")
        for segment in CASE_BOUNDARY.split(part)
        if segment
    ]
    if len(segments) < 2:
        return prefix + "".join(segments)

    head, rest = segments[0], segments[1:]
    return prefix + head.lower() + "".join(segment[0].upper() + segment[1:] for segment in rest)


def to_identifier(name: str, camel: bool = False, reserved: Iterable[str] = ()) -> str:
    """Turn a raw database identifier into a valid Python identifier.

    Idempotent: feeding the result back in returns it unchanged.
    """
    identifier = NON_WORD.sub("_", name)
    if camel:
        identifier = camelize(identifier)
    if not identifier:
        return "_"
    if identifier[0].isdigit():
        identifier = "_" + identifier
    if keyword.iskeyword(identifier) or identifier in reserved:
        identifier += "_"
    return identifier


def resolve_names(schema: Schema, camelize: bool = False) -> Schema:
    """Return a new schema with table and column properties resolved.

    Raises:
        NameCollisionError: if two tables, or two columns of one table,
            end up with the same property
    """
    tables: List[Table] = []
    table_properties: Dict[str, List[str]] = {}

    for table in schema.tables:
        table_property = to_identifier(table.name, camelize, RESERVED_TABLE_NAMES)
        table_properties.setdefault(table_property, []).append(table.name)

        column_properties: Dict[str, List[str]] = {}
        columns = []
        for column in table.columns:
            column_property = to_identifier(column.name, camelize)
            column_properties.setdefault(column_property, []).append(column.name)
            columns.append(replace(column, property=column_property))

        _check_collisions(column_properties.items(), table=table.name)
        tables.append(table.with_columns(columns, property=table_property))

    _check_collisions(table_properties.items())
    logger.debug("Resolved names for %d tables (camelize=%s)", len(tables), camelize)
    return schema.with_tables(tables)


def _check_collisions(properties: Iterable[Tuple[str, List[str]]], table: str = None):
    for property_name, names in properties:
        if len(names) > 1:
            raise NameCollisionError(property_name, names, table=table)
