"""Utility modules for the charging analytics API."""

from .error_codes import (
    ErrorCategory,
    ErrorCode,
    StructuredError,
    error_code_for,
    http_status_for,
)
from .responses import error_response, success_response
from .wide_events import WideEvent, track_operation

__all__ = [
    'ErrorCategory',
    'ErrorCode',
    'StructuredError',
    'error_code_for',
    'http_status_for',
    'error_response',
    'success_response',
    'WideEvent',
    'track_operation',
]
