"""Core appconfig module: errors and logging."""

from appconfig.core.exceptions import AppError, ConfigurationError, ErrorCode
from appconfig.core.structured_logger import StructuredLogger, configure_logging, get_logger

__all__ = [
    "AppError",
    "ConfigurationError",
    "ErrorCode",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
