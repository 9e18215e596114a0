"""Code generation module for sql-generate.

Filters tables, resolves property names and renders the schema as
SQLAlchemy Core table definitions.
"""

from .filters import compile_patterns, filter_tables, is_excluded
from .names import camelize, to_identifier, resolve_names
from .emitter import CodeEmitter, INDEX_MODULE

__all__ = [
    "compile_patterns",
    "filter_tables",
    "is_excluded",
    "camelize",
    "to_identifier",
    "resolve_names",
    "CodeEmitter",
    "INDEX_MODULE",
]
