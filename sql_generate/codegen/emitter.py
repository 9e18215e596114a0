"""Renders a resolved schema as SQLAlchemy Core table definitions."""

import keyword
import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union, TYPE_CHECKING

from .. import __version__
from ..database.models import Column, Schema, Table
from ..errors import ConfigurationError, GenerationError

if TYPE_CHECKING:
    from ..options import GenerationOptions

logger = logging.getLogger(__name__)

INDEX_MODULE = "__init__"


class CodeEmitter:
    """Generates Python source from a resolved schema.

    Output is a pure function of the schema, the options and ``now``
    (which only feeds the banner comment).
    """

    def __init__(self, options: Union["GenerationOptions", Mapping[str, Any], None] = None, now: Optional[datetime] = None):
        from ..options import GenerationOptions

        if options is None:
            options = GenerationOptions()
        elif isinstance(options, Mapping):
            options = GenerationOptions.from_mapping(options)
        elif not isinstance(options, GenerationOptions):
            raise ConfigurationError(
                f"options must be GenerationOptions or a mapping, got {type(options).__name__}"
            )
        self.options = options
        self.now = now

    def emit(self, schema: Schema) -> Union[str, Dict[str, str]]:
        """Render the schema into one buffer, or one per table plus an index."""
        self._check_identifiers(schema)
        timestamp = (self.now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

        if self.options.modularize:
            modules = {
                table.property: self._finish(self._table_module(schema, table), timestamp)
                for table in schema.tables
            }
            modules[INDEX_MODULE] = self._finish(self._index_module(schema), timestamp)
            logger.debug("Emitted %d modules", len(modules))
            return modules

        return self._finish(self._combined(schema), timestamp)

    def _combined(self, schema: Schema) -> List[str]:
        lines = ["import sqlalchemy as sa", "", "metadata = sa.MetaData()"]
        for table in schema.tables:
            lines.extend(["", ""])
            lines.extend(self._table_block(schema, table))
        return lines

    def _table_module(self, schema: Schema, table: Table) -> List[str]:
        lines = ["import sqlalchemy as sa", "", "from . import metadata", "", ""]
        lines.extend(self._table_block(schema, table))
        return lines

    def _index_module(self, schema: Schema) -> List[str]:
        lines = ["import sqlalchemy as sa", "", "metadata = sa.MetaData()", ""]
        lines.extend(f"from .{table.property} import {table.property}" for table in schema.tables)
        if schema.tables:
            lines.append("")
        lines.append("__all__ = [")
        lines.append(self._indent(1) + _literal("metadata") + ",")
        lines.extend(self._indent(1) + _literal(table.property) + "," for table in schema.tables)
        lines.append("]")
        return lines

    def _table_block(self, schema: Schema, table: Table) -> List[str]:
        lines = []
        if not self.options.omit_comments:
            lines.append(f"# SQL definition for {self._qualified_name(schema, table)}")

        lines.append(f"{table.property} = sa.Table(")
        lines.append(self._indent(1) + _literal(table.name) + ",")
        lines.append(self._indent(1) + "metadata,")
        for column in table.columns:
            lines.append(self._indent(1) + self._column(column))
        if self.options.include_schema and schema.name:
            lines.append(self._indent(1) + f"schema={_literal(schema.name)},")
        lines.append(")")
        return lines

    def _column(self, column: Column) -> str:
        args = [_literal(column.name), f"key={_literal(column.property)}"]
        if self.options.include_meta:
            args.append(f"info={self._meta(column)}")

        line = f"sa.Column({', '.join(args)}),"
        if not self.options.omit_comments:
            line += f"  # {column.describe_type()}, {'nullable' if column.nullable else 'not null'}"
        return line

    @staticmethod
    def _meta(column: Column) -> str:
        items = [
            ("type", column.type),
            ("charLength", column.char_length),
            ("nullable", column.nullable),
        ]
        return "{" + ", ".join(f"{_literal(key)}: {_literal(value)}" for key, value in items) + "}"

    def _qualified_name(self, schema: Schema, table: Table) -> str:
        if self.options.include_schema and schema.name:
            return f"{schema.name}.{table.name}"
        return table.name

    def _indent(self, level: int) -> str:
        return self.options.indent * level

    def _finish(self, body: List[str], timestamp: str) -> str:
        lines = []
        if not self.options.omit_comments:
            lines.append(f"# autogenerated by sql-generate v{__version__} on {timestamp}")
        # affixes may span several lines; they get the configured eol too
        if self.options.prepend is not None:
            lines.extend(_affix_lines(self.options.prepend))
        lines.extend(body)
        if self.options.append is not None:
            lines.extend(_affix_lines(self.options.append))

        eol = self.options.eol
        return eol.join(lines) + eol

    @staticmethod
    def _check_identifiers(schema: Schema):
        for table in schema.tables:
            names = [table.property] + [column.property for column in table.columns]
            for name in names:
                if not name.isidentifier() or keyword.iskeyword(name):
                    raise GenerationError(
                        f"'{name}' in table '{table.name}' is not a valid identifier; resolve names first",
                        details={"table": table.name, "property": name},
                    )


def _affix_lines(text: str) -> List[str]:
    """Split prepend/append text into lines, keeping trailing blank lines."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _literal(value: Any) -> str:
    """Python source literal for a str, int, bool or None."""
    return repr(value)
