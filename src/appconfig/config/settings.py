"""
Pydantic Settings Configuration
===============================

Runtime settings for ambient concerns (logging, bind address, env file).
Read from ``APP_``-prefixed environment variables; they never feed into the
validated AppConfig.
"""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from appconfig.core.exceptions import ConfigurationError


class RuntimeSettings(BaseSettings):
    """
    Process-level runtime settings.

    Environment variable mapping:
      APP_LOG_LEVEL
      APP_LOG_FORMAT
      APP_HOST
      APP_ENV_FILE
    """

    log_level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    log_format: Literal["json", "text"] = Field("json", description="Log format (json, text)")
    host: str = Field("127.0.0.1", description="Host to bind to")
    env_file: str = Field(".env", description="Dotenv file merged into the environment at startup")

    model_config = SettingsConfigDict(
        env_prefix='APP_',
        extra='ignore',
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator('log_format', mode='before')
    @classmethod
    def normalize_log_format(cls, v):
        return v.lower() if isinstance(v, str) else v


def load_runtime_settings() -> RuntimeSettings:
    """
    Load runtime settings from the environment.

    Raises:
        ConfigurationError: If a runtime setting is invalid
    """
    try:
        return RuntimeSettings()
    except ValidationError as exc:
        issues = [
            {
                'field': ".".join(str(p) for p in error['loc']),
                'variable': "APP_" + "_".join(str(p) for p in error['loc']).upper(),
                'message': error['msg'],
                'input': error.get('input'),
            }
            for error in exc.errors()
        ]
        raise ConfigurationError(
            "Runtime settings validation failed:\n"
            + "\n".join(f"  - {i['field']} ({i['variable']}): {i['message']}" for i in issues),
            issues,
        ) from exc


__all__ = [
    'RuntimeSettings',
    'load_runtime_settings',
]
