"""Error types for sql-generate."""

from typing import Optional, Dict, Any


class SQLGenerateError(Exception):
    """Base exception for sql-generate errors."""

    def __init__(self, message: str, code: str = "SQL_GENERATE_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured reporting."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SQLGenerateError):
    """Missing or invalid request/options, raised before any I/O."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class IntrospectionError(SQLGenerateError):
    """Error during database introspection."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INTROSPECTION_ERROR", details=details)


class NormalizationError(SQLGenerateError):
    """Raw introspection rows could not be turned into a canonical schema."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="NORMALIZATION_ERROR", details=details)


class NameCollisionError(SQLGenerateError):
    """Two identifiers resolved to the same property name."""

    def __init__(self, property_name: str, names: list, table: Optional[str] = None):
        scope = f"table '{table}'" if table else "schema"
        super().__init__(
            f"Names {', '.join(repr(n) for n in names)} in {scope} all resolve to property '{property_name}'",
            code="NAME_COLLISION_ERROR",
            details={"property": property_name, "names": list(names), "table": table},
        )
        self.property_name = property_name
        self.names = list(names)
        self.table = table


class GenerationError(SQLGenerateError):
    """Error during code emission."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="GENERATION_ERROR", details=details)
