import os


class Config:
    """Application configuration from environment variables."""

    SERVICE_NAME = os.environ.get('SERVICE_NAME', 'ev-charging-api')

    # Flask
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = FLASK_ENV == 'development'
    TESTING = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # API Configuration
    FLASK_HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.environ.get('FLASK_PORT', 5000))
    CACHE_TIMEOUT_SECONDS = int(os.environ.get('CACHE_TIMEOUT', 60))

    # Data source (JSON fixture). Empty means the built-in sample data set.
    DATASET_PATH = os.environ.get('DATASET_PATH', '')

    # Weekly data has no peak-hour column; the dashboard shows an estimate
    PEAK_HOUR_ESTIMATE_RATIO = float(os.environ.get('PEAK_HOUR_ESTIMATE_RATIO', 0.6))

    # Rate limiting
    RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'true').lower() == 'true'
    RATE_LIMIT_STORAGE_URI = os.environ.get('RATE_LIMIT_STORAGE_URI', 'memory://')

    # Comma-separated origins allowed to call /api/* from a browser
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Wide events: successful fast requests are sampled, errors and slow ones always logged
    LOGGING_SAMPLE_RATE = float(os.environ.get('LOGGING_SAMPLE_RATE', 0.05))
    LOGGING_SLOW_THRESHOLD_MS = float(os.environ.get('LOGGING_SLOW_THRESHOLD_MS', 1000))

    # Include exception messages in 500 responses. None follows DEBUG, which
    # create_app() derives from the final FLASK_ENV.
    EXPOSE_ERROR_DETAILS = None
