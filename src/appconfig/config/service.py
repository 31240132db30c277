"""Read-only access to the validated configuration."""

from __future__ import annotations

from typing import Any, Literal, overload

from appconfig.config.schema import AppConfig, DatabaseConfig, Environment

_REDACTED = "********"


class ConfigService:
    """
    Holds the AppConfig produced at startup and hands out individual fields.

    The service is constructed explicitly and passed to whatever needs it;
    values are returned as loaded, with no further coercion.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @overload
    def get(self, key: Literal["env"]) -> Environment: ...

    @overload
    def get(self, key: Literal["port"]) -> int: ...

    @overload
    def get(self, key: Literal["database"]) -> DatabaseConfig: ...

    def get(self, key: str) -> Any:
        """
        Return a top-level configuration field.

        Raises:
            KeyError: If ``key`` is not a configuration field
        """
        if key not in AppConfig.model_fields:
            raise KeyError(f"Unknown configuration key: {key!r}")
        return getattr(self._config, key)

    def redacted(self) -> dict[str, Any]:
        """Plain dict view of the configuration with secrets masked."""
        data = self._config.model_dump(mode="json")
        data["database"]["password"] = _REDACTED
        return data

    def __repr__(self) -> str:
        return f"ConfigService(env={self._config.env.value!r}, port={self._config.port})"
