"""Table exclusion by regular expression."""

import logging
import re
from typing import Iterable, List, Pattern, Sequence, Union

from ..database.models import Schema
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def compile_patterns(values: Iterable[Union[str, Pattern]]) -> List[Pattern]:
    """Compile exclusion patterns, accepting strings or compiled patterns.

    Raises:
        ConfigurationError: for anything that is not a valid pattern
    """
    patterns = []
    for value in values:
        if isinstance(value, re.Pattern):
            patterns.append(value)
        elif isinstance(value, str):
            try:
                patterns.append(re.compile(value))
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid exclude pattern {value!r}: {e}",
                    details={"pattern": value},
                )
        else:
            raise ConfigurationError(
                f"Exclude patterns must be strings or compiled regular expressions, got {type(value).__name__}",
                details={"pattern": repr(value)},
            )
    return patterns


def is_excluded(table_name: str, patterns: Sequence[Pattern]) -> bool:
    return any(pattern.search(table_name) for pattern in patterns)


def filter_tables(schema: Schema, patterns: Sequence[Pattern]) -> Schema:
    """Return a new schema without the tables matching any pattern."""
    kept = [table for table in schema.tables if not is_excluded(table.name, patterns)]
    if len(kept) != len(schema.tables):
        logger.info(
            "Excluded %d of %d tables: %s",
            len(schema.tables) - len(kept),
            len(schema.tables),
            ", ".join(t.name for t in schema.tables if is_excluded(t.name, patterns)),
        )
    return schema.with_tables(kept)
