"""
JSON response envelope shared by every API route.

    {"success": bool, "data": ..., "message": str, "error": str}

Handlers return plain dicts (Flask serializes them) so cached responses
stay picklable.
"""

from typing import Any, Optional, Tuple


def success_response(data: Any, message: str, status: int = 200) -> Tuple[dict, int]:
    """Wrap ``data`` in a success envelope."""
    return {
        "success": True,
        "data": data,
        "message": message,
    }, status


def error_response(message: str, status: int, error: Optional[str] = None) -> Tuple[dict, int]:
    """Build a failure envelope. ``error`` is omitted when not given."""
    body = {
        "success": False,
        "message": message,
    }
    if error is not None:
        body["error"] = error
    return body, status
