"""
Structured Logging
==================

Provides JSON-structured logging with secret redaction. Every record carries
the component name so startup output can be filtered per subsystem.
"""

import json
import logging
import re
from datetime import UTC, datetime

_SECRET_PATTERNS = re.compile(
    r"(Bearer\s+[A-Za-z0-9._~+/=-]+|"
    r"(?<=://)[^:/@\s]+:[^@\s]+(?=@)|"
    r"(?<=\"password\": \")[^\"]*(?=\"))",
    re.IGNORECASE,
)

_BASE_FIELDS = ('timestamp', 'level', 'component', 'message')

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_TAG = '_appconfig_handler'


def _redact_secrets(text: str) -> str:
    return _SECRET_PATTERNS.sub("[REDACTED]", text)


class StructuredLogger:
    """
    Structured logger that outputs JSON logs

    Example output:
    {
        "timestamp": "2026-10-18T10:30:45.123Z",
        "level": "INFO",
        "component": "Lifecycle",
        "message": "Configuration loaded",
        "environment": "development",
        "port": 3000
    }
    """

    def __init__(self, component: str, logger: logging.Logger | None = None) -> None:
        """
        Initialize structured logger

        Args:
            component: Component name (e.g., 'Lifecycle', 'ConfigLoader')
            logger: Optional existing logger (creates new if not provided)
        """
        self.component = component
        self.logger = logger or logging.getLogger(component)

    def _log(self, level: str, message: str, **kwargs) -> None:
        """
        Internal logging method

        Args:
            level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
            message: Log message
            **kwargs: Additional structured fields
        """
        log_entry = {
            'timestamp': datetime.now(tz=UTC).isoformat(),
            'level': level,
            'component': self.component,
            'message': _redact_secrets(message),
        }

        # Add additional fields, redacting string values
        for k, v in kwargs.items():
            log_entry[k] = _redact_secrets(v) if isinstance(v, str) else v

        json_log = _redact_secrets(json.dumps(log_entry, default=str))

        log_method = getattr(self.logger, level.lower())
        log_method(json_log, extra={'structured': log_entry})

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message"""
        self._log('DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message"""
        self._log('INFO', message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message"""
        self._log('WARNING', message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message"""
        self._log('ERROR', message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message"""
        self._log('CRITICAL', message, **kwargs)


class TextFormatter(logging.Formatter):
    """Renders structured records as ``time LEVEL component: message key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, 'structured', None)
        if entry is None:
            return super().format(record)
        extras = " ".join(
            f"{k}={_redact_secrets(json.dumps(v, default=str))}"
            for k, v in entry.items()
            if k not in _BASE_FIELDS
        )
        line = f"{self.formatTime(record)} {entry['level']} {entry['component']}: {entry['message']}"
        return f"{line} {extras}" if extras else line


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def configure_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """
    Install a single stream handler on the root logger.

    Args:
        level: Root log level name
        fmt: 'json' emits the raw JSON record, 'text' a human-readable line

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    if fmt == "text":
        handler.setFormatter(TextFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_TAG, True)

    root.addHandler(handler)
    root.setLevel(level.upper())
    return handler


def get_logger(component: str) -> StructuredLogger:
    """
    Get a structured logger for a component

    Args:
        component: Component name

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(component)
