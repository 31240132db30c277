"""
Configuration Schema
====================

Pydantic models describing the validated application configuration.
Instances are frozen: once loaded they are read-only for the lifetime of the
process.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _reject_digit_separators(v):
    """
    Refuse Python-style digit separators in port strings.

    Pydantic's lax int parsing would read "1_000" as 1000. Surrounding
    whitespace and an integral float form such as "3000.0" are still accepted.
    """
    if isinstance(v, str) and "_" in v:
        raise ValueError("Port must be written as plain digits, without '_' separators")
    return v


class Environment(str, Enum):
    """Deployment environments the application may run in"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class DatabaseConfig(BaseModel):
    """Database connection configuration"""
    host: str = Field(..., min_length=1, description="Database host name")
    port: int = Field(..., gt=0, description="Database port")
    username: str = Field(..., min_length=1, description="Database user")
    password: str = Field(..., min_length=1, description="Database password")
    database: str = Field(..., min_length=1, description="Database name")

    @field_validator('port', mode='before')
    @classmethod
    def validate_port_digits(cls, v):
        return _reject_digit_separators(v)

    model_config = ConfigDict(frozen=True, extra='forbid')


class AppConfig(BaseModel):
    """Validated application configuration"""
    env: Environment = Field(..., description="Deployment environment")
    port: int = Field(..., gt=0, description="HTTP port to listen on")
    database: DatabaseConfig

    @field_validator('port', mode='before')
    @classmethod
    def validate_port_digits(cls, v):
        return _reject_digit_separators(v)

    model_config = ConfigDict(frozen=True, extra='forbid')


# Fields whose raw input must never be echoed back in errors or logs
SECRET_FIELDS = frozenset({"database.password"})


__all__ = [
    'AppConfig',
    'DatabaseConfig',
    'Environment',
    'SECRET_FIELDS',
]
