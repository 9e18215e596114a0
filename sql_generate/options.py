"""Request and option models, validated once before any I/O."""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Pattern, Tuple

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator

from .codegen.filters import compile_patterns
from .config import settings
from .dsn import ConnectionDescriptor, parse_dsn
from .errors import ConfigurationError

SUPPORTED_DIALECTS = ("mysql", "pg", "mssql")

LINE_ENDINGS = ("\n", "\r\n", "\r")


def _configuration_error(error: ValidationError) -> ConfigurationError:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        if item["type"] == "extra_forbidden":
            messages.append(f"unsupported option '{location}'")
        else:
            messages.append(f"invalid option '{location}': {item['msg']}")
    return ConfigurationError("; ".join(messages), details={"errors": error.errors(include_url=False)})


class GenerationOptions(BaseModel):
    """Formatting options for the code emitter.

    Accepts both the camelCase keys of the flat option bag
    (``omitComments``) and snake_case field names (``omit_comments``).
    """
    indent: StrictStr = Field(default_factory=lambda: settings.default_indent)
    eol: StrictStr = Field(default_factory=lambda: settings.default_eol)
    camelize: StrictBool = False
    prepend: Optional[StrictStr] = None
    append: Optional[StrictStr] = None
    omit_comments: StrictBool = Field(default=False, alias="omitComments")
    include_schema: StrictBool = Field(default=False, alias="includeSchema")
    modularize: StrictBool = False
    include_meta: StrictBool = Field(default=False, alias="includeMeta")
    exclude_regex: Tuple[Pattern, ...] = Field(default=(), alias="excludeRegex")

    class Config:
        frozen = True
        populate_by_name = True
        extra = "forbid"

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @field_validator("indent")
    @classmethod
    def _whitespace_indent(cls, value: str) -> str:
        if value.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return value

    @field_validator("eol")
    @classmethod
    def _known_line_ending(cls, value: str) -> str:
        if value not in LINE_ENDINGS:
            raise ValueError("eol must be one of '\\n', '\\r\\n' or '\\r'")
        return value

    @field_validator("exclude_regex", mode="before")
    @classmethod
    def _compile_exclude_regex(cls, value: Any) -> Tuple[Pattern, ...]:
        if value is None:
            return ()
        if isinstance(value, (str, re.Pattern)):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ConfigurationError(
                f"excludeRegex must be a list of patterns, got {type(value).__name__}",
                details={"excludeRegex": repr(value)},
            )
        return tuple(compile_patterns(value))

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]] = None) -> "GenerationOptions":
        return cls(**dict(values or {}))


@dataclass(frozen=True)
class Target:
    """A validated request: where to introspect and how to connect."""
    dialect: str
    database: str
    schema: Optional[str]
    descriptor: ConnectionDescriptor


class GenerationRequest(BaseModel):
    """Connection descriptor, dialect selector and options for one run."""
    dsn: Optional[StrictStr] = None
    dialect: Optional[StrictStr] = None
    database: Optional[StrictStr] = None
    schema_name: Optional[StrictStr] = Field(default=None, alias="schema")
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    class Config:
        populate_by_name = True
        extra = "forbid"

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "GenerationRequest":
        """Build a request from a flat option bag.

        ``dsn``, ``dialect``, ``database`` and ``schema`` describe the target;
        every other key is a generation option. The target is validated
        before the options.
        """
        values = dict(values)
        target_fields = {
            key: values.pop(key)
            for key in ("dsn", "dialect", "database", "schema")
            if key in values
        }
        cls(**target_fields).resolve()
        return cls(**target_fields, options=GenerationOptions.from_mapping(values))

    def resolve(self) -> Target:
        """Validate the target fields.

        Precedence: connection descriptor, dialect, supported dialect,
        database. The dialect and database fall back to what the DSN carries.

        Raises:
            ConfigurationError: on the first failed check
        """
        if not self.dsn:
            raise ConfigurationError("connection descriptor is required")

        try:
            descriptor = parse_dsn(self.dsn)
        except ValueError as e:
            raise ConfigurationError(f"invalid connection descriptor: {e}") from e

        dialect = self.dialect or descriptor.dialect
        if not dialect:
            raise ConfigurationError("dialect is required")
        if dialect not in SUPPORTED_DIALECTS:
            raise ConfigurationError(
                'dialect must be either "mysql", "pg" or "mssql"',
                details={"dialect": dialect, "supported": list(SUPPORTED_DIALECTS)},
            )

        database = self.database or descriptor.database
        if not database:
            raise ConfigurationError("database is required if it is not part of the connection descriptor")

        return Target(dialect=dialect, database=database, schema=self.schema_name, descriptor=descriptor)

    def summary(self) -> Dict[str, Any]:
        """Loggable view of the request without credentials."""
        return {
            "dialect": self.dialect,
            "database": self.database,
            "schema": self.schema_name,
            "options": self.options.model_dump(exclude={"exclude_regex"}),
            "exclude": [p.pattern for p in self.options.exclude_regex],
        }
