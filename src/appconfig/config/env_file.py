"""
Environment File Support
========================

Merges an optional ``.env`` file with the process environment so the loader
sees a single raw mapping. Values already present in the process environment
take precedence over the file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from appconfig.config.loader import FIELD_SOURCES
from appconfig.core.structured_logger import get_logger

logger = get_logger("EnvFile")

_EXAMPLE_VALUES = {
    "APP_ENV": "development",
    "PORT": "3000",
    "DATABASE_HOST": "localhost",
    "DATABASE_PORT": "5432",
    "DATABASE_USERNAME": "postgres",
    "DATABASE_PASSWORD": "postgres",
    "DATABASE_NAME": "postgres",
}


def read_environment(
    env_file: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Build the raw configuration mapping.

    Args:
        env_file: Optional path to a dotenv file; a missing file is skipped
        environ: Process environment override; defaults to ``os.environ``

    Returns:
        Merged mapping of variable names to string values
    """
    merged: dict[str, str] = {}

    if env_file is not None:
        path = Path(env_file).expanduser()
        if path.is_file():
            # Values are taken literally: no ${VAR} expansion from the process environment.
            # Bare keys (no '=') come back as None; keep them so they fail validation
            values = dotenv_values(path, interpolate=False)
            merged.update({k: v if v is not None else "" for k, v in values.items()})
            logger.debug("Loaded env file", path=str(path), keys=len(values))
        else:
            logger.debug("Env file not found, using process environment only", path=str(path))

    merged.update(os.environ if environ is None else environ)
    return merged


def render_example_env() -> str:
    """Return a commented ``.env`` template listing every recognised variable."""
    lines = [
        "# appconfig environment",
        "# Copy this to .env and fill in your values",
        "",
    ]
    for field_path, variable in FIELD_SOURCES.items():
        lines.append(f"# {field_path}")
        lines.append(f"{variable}={_EXAMPLE_VALUES[variable]}")
    lines.extend([
        "",
        "# Runtime settings (optional)",
        "# APP_LOG_LEVEL=INFO",
        "# APP_LOG_FORMAT=json",
        "# APP_HOST=127.0.0.1",
    ])
    return "\n".join(lines) + "\n"
