"""Turns raw adapter rows into the canonical schema model."""

import logging
from typing import Dict, Iterable, List, Optional

from ..errors import NormalizationError
from .models import Column, RawColumn, Schema, Table
from .type_mappers import TypeMapper

logger = logging.getLogger(__name__)


def normalize(
    rows: Iterable[RawColumn],
    type_mapper: TypeMapper,
    schema_name: Optional[str] = None,
) -> Schema:
    """Group raw column rows into tables and map native types.

    Tables keep the order in which they were first seen; columns are sorted
    by ordinal position. Column properties start out equal to the raw name.

    Args:
        rows: Raw rows from a dialect adapter
        type_mapper: The adapter's native -> canonical type mapper
        schema_name: Database/schema qualifier recorded on the result

    Returns:
        A new Schema

    Raises:
        NormalizationError: on empty input, missing names or duplicate columns
    """
    grouped: Dict[str, List[RawColumn]] = {}

    for index, row in enumerate(rows):
        if not row.table_name:
            raise NormalizationError(
                f"Row {index} is missing a table name",
                details={"row": index, "column_name": row.column_name},
            )
        if not row.column_name:
            raise NormalizationError(
                f"Row {index} of table '{row.table_name}' is missing a column name",
                details={"row": index, "table_name": row.table_name},
            )
        grouped.setdefault(row.table_name, []).append(row)

    if not grouped:
        raise NormalizationError("No columns to normalize")

    tables = [
        Table(name=table_name, property=table_name, columns=_normalize_columns(table_name, table_rows, type_mapper))
        for table_name, table_rows in grouped.items()
    ]

    schema = Schema(name=schema_name, tables=tables)
    logger.debug("Normalized %d tables with %d columns", len(schema), schema.column_count())
    return schema


def _normalize_columns(table_name: str, rows: List[RawColumn], type_mapper: TypeMapper) -> List[Column]:
    seen_names = set()
    seen_ordinals = set()
    for row in rows:
        if row.column_name in seen_names:
            raise NormalizationError(
                f"Duplicate column '{row.column_name}' in table '{table_name}'",
                details={"table_name": table_name, "column_name": row.column_name},
            )
        if row.ordinal_position in seen_ordinals:
            raise NormalizationError(
                f"Duplicate ordinal position {row.ordinal_position} in table '{table_name}'",
                details={"table_name": table_name, "ordinal_position": row.ordinal_position},
            )
        seen_names.add(row.column_name)
        seen_ordinals.add(row.ordinal_position)

    return [
        Column(
            name=row.column_name,
            property=row.column_name,
            type=type_mapper.to_canonical(row.data_type),
            char_length=row.char_length,
            nullable=bool(row.nullable),
        )
        for row in sorted(rows, key=lambda r: r.ordinal_position)
    ]
