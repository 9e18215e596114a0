"""Canonical schema models produced by introspection and normalization."""

from typing import Optional, List, Dict, Tuple, Iterator, Union, Any
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class RawColumn:
    """A single introspected column row in the uniform adapter shape."""
    table_name: str
    column_name: str
    ordinal_position: int
    data_type: str
    char_length: Optional[int] = None
    nullable: bool = True


@dataclass(frozen=True)
class Column:
    """Represents a normalized database column."""
    name: str
    property: str
    type: str
    char_length: Optional[int] = None
    nullable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "property": self.property,
            "type": self.type,
            "charLength": self.char_length,
            "nullable": self.nullable,
        }

    def describe_type(self) -> str:
        """Human readable type, e.g. ``varchar(30)``."""
        if self.char_length is None:
            return self.type
        return f"{self.type}({self.char_length})"


@dataclass(frozen=True)
class Table:
    """Represents a normalized database table."""
    name: str
    property: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))

    def get_column(self, column_name: str) -> Optional[Column]:
        """Find a column by raw name."""
        for column in self.columns:
            if column.name == column_name:
                return column
        return None

    def with_columns(self, columns: List[Column], **changes) -> "Table":
        return replace(self, columns=tuple(columns), **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "property": self.property,
            "columns": [column.to_dict() for column in self.columns],
        }


@dataclass(frozen=True)
class Schema:
    """Canonical schema: an ordered sequence of tables with lookup by raw name.

    ``name`` is the database/schema qualifier the tables were read from.
    """
    name: Optional[str] = None
    tables: Tuple[Table, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tables", tuple(self.tables))

    def __getitem__(self, table_name: str) -> Table:
        table = self.get_table(table_name)
        if table is None:
            raise KeyError(table_name)
        return table

    def __contains__(self, table_name: object) -> bool:
        return self.get_table(table_name) is not None

    def __iter__(self) -> Iterator[Table]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def get_table(self, table_name) -> Optional[Table]:
        """Find a table by raw name."""
        for table in self.tables:
            if table.name == table_name:
                return table
        return None

    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]

    def column_count(self) -> int:
        return sum(len(table.columns) for table in self.tables)

    def with_tables(self, tables: List[Table]) -> "Schema":
        return replace(self, tables=tuple(tables))

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {table.name: table.to_dict() for table in self.tables}


@dataclass(frozen=True)
class GenerationResult:
    """Final result of a generation run: the tables plus rendered buffer(s)."""
    tables: Schema
    buffer: Union[str, Dict[str, str]]

    @property
    def is_modular(self) -> bool:
        return isinstance(self.buffer, dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tables": self.tables.to_dict(),
            "buffer": dict(self.buffer) if self.is_modular else self.buffer,
        }
