"""
Services module for charging analytics business logic.

This module contains service classes that encapsulate business logic
separate from the Flask route handlers.
"""

from charging_api.services.query_service import QueryService

__all__ = [
    'QueryService',
]
