"""
Flask extensions for the charging analytics API.

This module initializes Flask extensions that need to be shared
across the application to avoid circular imports.
"""

from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from charging_api.config import Config

cache = Cache()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["1000 per hour", "200 per minute"],  # Global default
    storage_uri=Config.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    headers_enabled=True,  # Return X-RateLimit-* headers
)


class RateLimits:
    """Common rate limit configurations for different endpoint types."""

    # Read-heavy endpoints (data, summaries)
    READ_HEAVY = "500 per hour"

    # Liveness probes
    HEALTH = "120 per minute"


def init_cache(app):
    """Initialize cache based on environment."""
    if app.config.get('TESTING'):
        cache.init_app(app, config={'CACHE_TYPE': 'NullCache'})
    else:
        cache.init_app(app, config={
            'CACHE_TYPE': 'SimpleCache',
            'CACHE_DEFAULT_TIMEOUT': app.config.get('CACHE_TIMEOUT_SECONDS', Config.CACHE_TIMEOUT_SECONDS),
        })
