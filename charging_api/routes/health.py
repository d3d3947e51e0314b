"""
Health routes for the charging analytics API.

Liveness endpoint used by the dashboard and by load balancers.
"""

from flask import Blueprint, Response, jsonify

from charging_api.extensions import RateLimits, limiter

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
@limiter.limit(RateLimits.HEALTH)
def health() -> Response:
    """Report that the API process is up."""
    return jsonify({
        'success': True,
        'status': 'OK',
        'message': 'EV Charger API is running',
    })
