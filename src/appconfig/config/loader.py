"""Build an AppConfig from a raw environment mapping."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from appconfig.config.schema import SECRET_FIELDS, AppConfig
from appconfig.core.exceptions import ConfigurationError
from appconfig.core.structured_logger import get_logger

logger = get_logger("ConfigLoader")

# Dotted config field -> environment variable it is read from
FIELD_SOURCES: dict[str, str] = {
    "env": "APP_ENV",
    "port": "PORT",
    "database.host": "DATABASE_HOST",
    "database.port": "DATABASE_PORT",
    "database.username": "DATABASE_USERNAME",
    "database.password": "DATABASE_PASSWORD",
    "database.database": "DATABASE_NAME",
}


def field_sources() -> dict[str, str]:
    """Return a copy of the field path to environment variable table."""
    return dict(FIELD_SOURCES)


def _extract(environ: Mapping[str, str]) -> dict[str, Any]:
    """Assemble the nested raw payload, leaving absent keys out so they report as missing."""
    payload: dict[str, Any] = {"database": {}}
    for field_path, variable in FIELD_SOURCES.items():
        if variable not in environ:
            continue
        target = payload
        *parents, leaf = field_path.split(".")
        for parent in parents:
            target = target[parent]
        target[leaf] = environ[variable]
    return payload


def _describe(exc: ValidationError) -> list[dict[str, Any]]:
    issues = []
    for error in exc.errors():
        field_path = ".".join(str(part) for part in error["loc"])
        raw = None if error["type"] == "missing" else error.get("input")
        if field_path in SECRET_FIELDS and raw is not None:
            raw = "********"
        issues.append({
            "field": field_path,
            "variable": FIELD_SOURCES.get(field_path),
            "message": error["msg"],
            "input": raw,
        })
    return issues


def format_issues(issues: list[dict[str, Any]]) -> str:
    """Render issues as the aggregate, one-line-per-field error message."""
    lines = []
    for issue in issues:
        source = f" ({issue['variable']})" if issue["variable"] else ""
        lines.append(f"  - {issue['field']}{source}: {issue['message']}")
    return "Configuration validation failed:\n" + "\n".join(lines)


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Validate raw environment values and return the typed configuration.

    Args:
        environ: Raw key/value mapping; defaults to ``os.environ``

    Returns:
        Frozen AppConfig with every field coerced and validated

    Raises:
        ConfigurationError: If any field is missing or invalid. The message
            lists every failing field, not just the first.
    """
    if environ is None:
        environ = os.environ

    try:
        config = AppConfig.model_validate(_extract(environ))
    except ValidationError as exc:
        issues = _describe(exc)
        logger.debug("Configuration rejected", error_count=len(issues))
        raise ConfigurationError(format_issues(issues), issues) from exc

    return config
