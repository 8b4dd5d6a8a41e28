"""
Custom exceptions and error handling for the restaurant store.

Defines application-specific exceptions with error codes so failures raised
inside the service carry a stable code and a client-safe message.
Datastore failures from botocore are not wrapped and propagate unchanged.

Usage:
    from core.errors import ConfigurationError, ErrorCode

    raise ConfigurationError("restaurants_table is not set", code=ErrorCode.CONFIGURATION_ERROR)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Record errors
    INVALID_RECORD = "INVALID_RECORD"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIGURATION_ERROR: "The restaurant service is not configured correctly.",
    ErrorCode.INVALID_RECORD: "A restaurant record could not be read.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class RestaurantStoreError(Exception):
    """Base exception for all restaurant store errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ConfigurationError(RestaurantStoreError):
    """Required configuration is missing or invalid."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION_ERROR):
        super().__init__(message, code=code)


class RecordValidationError(RestaurantStoreError):
    """A datastore record does not match the restaurant schema."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_RECORD):
        super().__init__(message, code=code)
