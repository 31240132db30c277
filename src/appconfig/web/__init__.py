"""HTTP interface."""

from appconfig.web.server import create_app, get_config_service

__all__ = ["create_app", "get_config_service"]
