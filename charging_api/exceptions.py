"""
Custom exceptions for the charging analytics API.

This module provides a hierarchy of exceptions for better error handling
and more informative error messages throughout the application.
"""


class ChargingApiError(Exception):
    """Base exception for all charging API errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidViewError(ChargingApiError):
    """View selector is not one of the supported aggregation views."""

    def __init__(self, view):
        super().__init__(
            'Invalid view parameter. Use "daily" or "weekly"',
            {'view': view},
        )
        self.view = view


class NotFoundError(ChargingApiError):
    """No record matches the requested period identifier."""

    def __init__(self, identifier: str, view: str = None):
        details = {'identifier': identifier}
        if view:
            details['view'] = view
        super().__init__(f"No data found for {identifier}", details)
        self.identifier = identifier
        self.view = view


class EmptyDataSetError(ChargingApiError):
    """Aggregation was requested over an empty set of records."""

    def __init__(self, view: str = None):
        details = {}
        if view:
            details['view'] = view
        super().__init__("Cannot summarize an empty data set", details)
        self.view = view


class DataSetValidationError(ChargingApiError):
    """A period record or fixture file violates the data model."""

    def __init__(
        self,
        message: str,
        field: str = None,
        value=None,
        index: int = None,
    ):
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = value
        if index is not None:
            details['index'] = index
        super().__init__(message, details)
        self.field = field
        self.value = value
        self.index = index


class ConfigurationError(ChargingApiError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, config_key: str = None):
        details = {}
        if config_key:
            details['config_key'] = config_key
        super().__init__(message, details)
        self.config_key = config_key
