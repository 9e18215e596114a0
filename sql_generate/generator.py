"""Generation pipeline: introspect, normalize, filter, resolve, emit."""

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from .codegen import CodeEmitter, filter_tables, resolve_names
from .database import DialectAdapter, GenerationResult, Schema, get_adapter, normalize
from .options import GenerationOptions, GenerationRequest

logger = logging.getLogger(__name__)


def build_schema(
    adapter: DialectAdapter,
    database: str,
    schema: Optional[str] = None,
) -> Schema:
    """Introspect through an adapter and return the canonical schema.

    The adapter is closed afterwards whether or not introspection succeeded.
    """
    with adapter:
        rows = adapter.fetch_columns(database, schema)
        return normalize(rows, adapter.type_mapper, schema_name=adapter.resolve_schema(database, schema))


def render(
    schema: Schema,
    options: Optional[GenerationOptions] = None,
    now: Optional[datetime] = None,
) -> GenerationResult:
    """Filter, resolve and emit an already normalized schema."""
    options = options or GenerationOptions()
    emitter = CodeEmitter(options, now=now)

    filtered = filter_tables(schema, options.exclude_regex)
    resolved = resolve_names(filtered, camelize=options.camelize)
    buffer = emitter.emit(resolved)

    return GenerationResult(tables=resolved, buffer=buffer)


def generate(
    request: Union[GenerationRequest, Mapping[str, Any]],
    adapter: Optional[DialectAdapter] = None,
    connection: Any = None,
    now: Optional[datetime] = None,
) -> GenerationResult:
    """Run the whole pipeline for one request.

    Args:
        request: A GenerationRequest or a flat option bag
            (``{"dsn": ..., "dialect": ..., "camelize": True, ...}``)
        adapter: Adapter to use instead of the one registered for the dialect
        connection: Already open DB-API connection handed to the adapter
        now: Timestamp for the banner comment

    Returns:
        GenerationResult with the resolved tables and generated buffer(s)

    Raises:
        ConfigurationError: invalid request or options, before any I/O
        IntrospectionError, NormalizationError, NameCollisionError: pipeline failures
        Driver exceptions are propagated unchanged.
    """
    if not isinstance(request, GenerationRequest):
        request = GenerationRequest.from_mapping(request)
    target = request.resolve()

    logger.info("Generating %s schema for database '%s'", target.dialect, target.database)
    logger.debug("Request: %s", request.summary())

    if adapter is None:
        adapter = get_adapter(target.dialect, descriptor=target.descriptor, connection=connection)

    schema = build_schema(adapter, target.database, target.schema)
    logger.info("Introspected %d tables with %d columns", len(schema), schema.column_count())

    result = render(schema, request.options, now=now)
    logger.info("Generated code for %d tables", len(result.tables))
    return result
