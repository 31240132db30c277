"""
Custom Exceptions for appconfig
===============================

Structured error handling allows entry points to handle errors appropriately
based on type rather than parsing strings.

Error Codes:
- 5xxx: System errors (internal, configuration)
"""

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Structured error codes for operator-facing messages"""

    # 5xxx: System Errors
    INTERNAL_ERROR = 5001
    CONFIGURATION_ERROR = 5003


class AppError(Exception):
    """Base exception for all appconfig errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging"""
        return {
            'error_type': self.__class__.__name__,
            'error_code': int(self.error_code),
            'message': self.message,
            'details': self.details
        }

    def user_message(self) -> str:
        """Get a short message based on error code"""
        code_messages = {
            ErrorCode.INTERNAL_ERROR: "Internal server error",
            ErrorCode.CONFIGURATION_ERROR: "Configuration error",
        }
        return f"Error {self.error_code}: {code_messages.get(self.error_code, self.message)}"


class ConfigurationError(AppError):
    """Raised when environment-derived configuration fails validation.

    ``errors`` holds one entry per failing field with the keys ``field``,
    ``variable``, ``message`` and ``input``.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = list(errors or [])
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, {'errors': self.errors})

    @property
    def fields(self) -> list[str]:
        """Dotted paths of every field that failed validation"""
        return [e['field'] for e in self.errors]
