"""
Error Code Taxonomy for the charging analytics API.

Structured error codes for better alerting, debugging, and monitoring.

Error Code Format:
- E001-E099: Validation errors (bad input, bad fixture data)
- E400-E499: Business logic errors (aggregation)
- E500-E599: System errors (configuration, unhandled failures)
"""

from enum import Enum
from typing import Optional

from charging_api.exceptions import (
    ChargingApiError,
    ConfigurationError,
    DataSetValidationError,
    EmptyDataSetError,
    InvalidViewError,
    NotFoundError,
)


class ErrorCategory(str, Enum):
    """High-level error categories for grouping and alerting."""

    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"
    SYSTEM = "system"


class ErrorCode(str, Enum):
    """Structured error codes with consistent format."""

    # Validation Errors (E001-E099)
    E001_INVALID_VIEW = "E001"  # View selector not daily/weekly
    E002_RECORD_NOT_FOUND = "E002"  # No record for the period identifier
    E003_INVALID_DATASET = "E003"  # Fixture row violates the data model
    E004_ROUTE_NOT_FOUND = "E004"  # Unknown URL
    E005_METHOD_NOT_ALLOWED = "E005"  # HTTP method not supported by the route
    E006_BAD_REQUEST = "E006"  # Any other client-side HTTP error

    # Business Logic Errors (E400-E499)
    E400_EMPTY_DATASET = "E400"  # Aggregation over zero records

    # System Errors (E500-E599)
    E500_INTERNAL_SERVER_ERROR = "E500"  # Unhandled internal error
    E501_CONFIGURATION_ERROR = "E501"  # Missing or invalid configuration


# Error metadata: maps error codes to categories, descriptions and HTTP status
ERROR_METADATA = {
    ErrorCode.E001_INVALID_VIEW: {
        "category": ErrorCategory.VALIDATION,
        "description": "Unrecognized view selector",
        "severity": "warning",
        "alert": False,
        "http_status": 400,
    },
    ErrorCode.E002_RECORD_NOT_FOUND: {
        "category": ErrorCategory.VALIDATION,
        "description": "No record for the requested period",
        "severity": "info",
        "alert": False,
        "http_status": 404,
    },
    ErrorCode.E003_INVALID_DATASET: {
        "category": ErrorCategory.VALIDATION,
        "description": "Data set violates the record invariants",
        "severity": "critical",
        "alert": True,
        "http_status": 500,
    },
    ErrorCode.E004_ROUTE_NOT_FOUND: {
        "category": ErrorCategory.VALIDATION,
        "description": "Route not found",
        "severity": "info",
        "alert": False,
        "http_status": 404,
    },
    ErrorCode.E005_METHOD_NOT_ALLOWED: {
        "category": ErrorCategory.VALIDATION,
        "description": "HTTP method not allowed for the route",
        "severity": "info",
        "alert": False,
        "http_status": 405,
    },
    ErrorCode.E006_BAD_REQUEST: {
        "category": ErrorCategory.VALIDATION,
        "description": "Request rejected by the HTTP layer",
        "severity": "warning",
        "alert": False,
        "http_status": 400,
    },
    ErrorCode.E400_EMPTY_DATASET: {
        "category": ErrorCategory.BUSINESS_LOGIC,
        "description": "Summary requested over an empty data set",
        "severity": "critical",
        "alert": True,
        "http_status": 500,
    },
    ErrorCode.E500_INTERNAL_SERVER_ERROR: {
        "category": ErrorCategory.SYSTEM,
        "description": "Unhandled internal error",
        "severity": "critical",
        "alert": True,
        "http_status": 500,
    },
    ErrorCode.E501_CONFIGURATION_ERROR: {
        "category": ErrorCategory.SYSTEM,
        "description": "Missing or invalid configuration",
        "severity": "critical",
        "alert": True,
        "http_status": 500,
    },
}

# Most specific class first
_EXCEPTION_CODES = (
    (InvalidViewError, ErrorCode.E001_INVALID_VIEW),
    (NotFoundError, ErrorCode.E002_RECORD_NOT_FOUND),
    (DataSetValidationError, ErrorCode.E003_INVALID_DATASET),
    (EmptyDataSetError, ErrorCode.E400_EMPTY_DATASET),
    (ConfigurationError, ErrorCode.E501_CONFIGURATION_ERROR),
)


def get_error_metadata(error_code: ErrorCode) -> dict:
    """Get metadata for an error code."""
    return ERROR_METADATA.get(
        error_code,
        {
            "category": ErrorCategory.SYSTEM,
            "description": "Unknown error",
            "severity": "error",
            "alert": True,
            "http_status": 500,
        },
    )


def error_code_for(exception: Exception) -> ErrorCode:
    """Map an exception to its error code (E500 for anything unrecognized)."""
    if isinstance(exception, ChargingApiError):
        for exc_type, code in _EXCEPTION_CODES:
            if isinstance(exception, exc_type):
                return code
    return ErrorCode.E500_INTERNAL_SERVER_ERROR


def http_status_for(exception: Exception) -> int:
    """HTTP status the API layer reports for an exception."""
    return get_error_metadata(error_code_for(exception))["http_status"]


class StructuredError:
    """Structured error with code, category, and metadata."""

    def __init__(self, code: ErrorCode, message: str, exception: Optional[Exception] = None, **context):
        """
        Create a structured error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            exception: Original exception (if applicable)
            **context: Additional context fields (view, identifier, etc.)
        """
        self.code = code
        self.message = message
        self.exception = exception
        self.context = context
        self.metadata = get_error_metadata(code)

    @classmethod
    def from_exception(cls, exception: Exception, **context) -> "StructuredError":
        """Build a structured error, carrying ChargingApiError details as context."""
        details = getattr(exception, "details", None) or {}
        message = getattr(exception, "message", None) or str(exception)
        return cls(error_code_for(exception), message, exception, **{**details, **context})

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.code.value}] {self.message}"
