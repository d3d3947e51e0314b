"""
Routes module for the charging analytics Flask blueprints.

This module contains Flask blueprints that handle different areas of the API.
"""

from charging_api.routes.charging_data import charging_data_bp
from charging_api.routes.health import health_bp

__all__ = [
    "charging_data_bp",
    "health_bp",
]


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(charging_data_bp, url_prefix="/api")
