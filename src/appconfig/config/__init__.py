"""Configuration loading, validation and access."""

from appconfig.config.env_file import read_environment, render_example_env
from appconfig.config.loader import field_sources, load_config
from appconfig.config.schema import AppConfig, DatabaseConfig, Environment
from appconfig.config.service import ConfigService
from appconfig.config.settings import RuntimeSettings, load_runtime_settings

__all__ = [
    "AppConfig",
    "ConfigService",
    "DatabaseConfig",
    "Environment",
    "RuntimeSettings",
    "field_sources",
    "load_config",
    "load_runtime_settings",
    "read_environment",
    "render_example_env",
]
