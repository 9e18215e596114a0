"""Configuration management for sql-generate."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.sql-generate/.env
    3. Package directory (where this file is located)
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".sql-generate" / ".env"
    if user_env.exists():
        return str(user_env)

    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from SQL_GENERATE_* environment variables."""

    default_indent: str = Field(
        default="    ",
        description="Indentation used per nesting level when no indent option is given"
    )
    default_eol: str = Field(
        default="\n",
        description="Line ending used when no eol option is given"
    )
    default_pg_schema: str = Field(
        default="public",
        description="PostgreSQL schema introspected when none is requested"
    )
    default_mssql_schema: str = Field(
        default="dbo",
        description="SQL Server schema introspected when none is requested"
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI"
    )

    class Config:
        env_prefix = "SQL_GENERATE_"
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
