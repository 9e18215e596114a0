"""sql-generate: generate SQLAlchemy table definitions from a live database."""

__version__ = "0.1.0"

from .errors import (
    SQLGenerateError,
    ConfigurationError,
    IntrospectionError,
    NormalizationError,
    NameCollisionError,
    GenerationError,
)
from .options import GenerationOptions, GenerationRequest, SUPPORTED_DIALECTS
from .database import Column, Table, Schema, GenerationResult
from .generator import generate, render, build_schema

__all__ = [
    "__version__",
    "generate",
    "render",
    "build_schema",
    "GenerationOptions",
    "GenerationRequest",
    "SUPPORTED_DIALECTS",
    "Column",
    "Table",
    "Schema",
    "GenerationResult",
    "SQLGenerateError",
    "ConfigurationError",
    "IntrospectionError",
    "NormalizationError",
    "NameCollisionError",
    "GenerationError",
]
