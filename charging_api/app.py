"""
EV Charging Analytics - Flask Application

Serves daily/weekly charging aggregates and summary statistics to the
dashboard.
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from charging_api.config import Config
from charging_api.dataset import load_dataset_file
from charging_api.exceptions import ChargingApiError
from charging_api.extensions import init_cache, limiter
from charging_api.fixtures import sample_datasets
from charging_api.routes import register_blueprints
from charging_api.routes.charging_data import QUERY_SERVICE_KEY
from charging_api.services import QueryService
from charging_api.utils.error_codes import ErrorCode, error_code_for, http_status_for
from charging_api.utils.responses import error_response
from charging_api.utils.wide_events import log_dataset_loaded

logger = logging.getLogger(__name__)


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_query_service(app: Flask) -> QueryService:
    """
    Load the data sets named by the app config and wrap them in a QueryService.

    Invalid or empty data stops startup instead of failing later per request.
    """
    path = app.config.get('DATASET_PATH')
    source = path or 'builtin-sample'
    try:
        datasets = load_dataset_file(path) if path else sample_datasets()
        service = QueryService(datasets, peak_hour_ratio=app.config['PEAK_HOUR_ESTIMATE_RATIO'])
    except ChargingApiError as e:
        log_dataset_loaded(source, {}, success=False, error=str(e))
        logger.error(f"Refusing to start with invalid charging data: {e}")
        raise

    log_dataset_loaded(source, {view.value: len(ds) for view, ds in datasets.items()}, success=True)
    return service


def register_error_handlers(app: Flask) -> None:
    """Translate exceptions into the API's JSON envelope."""

    @app.errorhandler(ChargingApiError)
    def handle_charging_api_error(e):
        status = http_status_for(e)
        if status >= 500:
            logger.error(f"Charging data error: {e}")
        return error_response(e.message, status, error=error_code_for(e).value)

    @app.errorhandler(NotFound)
    def handle_route_not_found(e):
        return error_response("Route not found", 404, error=ErrorCode.E004_ROUTE_NOT_FOUND.value)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e):
        body, status = error_response(
            'Method not allowed', 405, error=ErrorCode.E005_METHOD_NOT_ALLOWED.value
        )
        return body, status, {'Allow': ', '.join(sorted(e.valid_methods or []))}

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        status = e.code or 500
        code = ErrorCode.E006_BAD_REQUEST if status < 500 else ErrorCode.E500_INTERNAL_SERVER_ERROR
        return error_response(e.description or e.name, status, error=code.value)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception(f"Unhandled error: {e}")
        detail = str(e) if app.config.get('EXPOSE_ERROR_DETAILS') else "Internal server error"
        return error_response("Something went wrong!", 500, error=detail)


def configure_environment(app: Flask, overrides: dict) -> None:
    """Derive settings that follow FLASK_ENV unless they were set explicitly."""
    if 'DEBUG' not in overrides:
        app.config['DEBUG'] = app.config['FLASK_ENV'] == 'development'
    if app.config.get('EXPOSE_ERROR_DETAILS') is None:
        app.config['EXPOSE_ERROR_DETAILS'] = app.config['DEBUG']


def register_cors(app: Flask) -> None:
    """Allow the dashboard, served from another origin, to call the API."""
    origins = app.config['CORS_ORIGINS']
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(',') if o.strip()]
    CORS(app, resources={r'/api/*': {'origins': origins}})


def register_security_headers(app: Flask) -> None:
    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


def create_app(config_overrides: Optional[dict] = None, query_service: Optional[QueryService] = None) -> Flask:
    """
    Application factory.

    Args:
        config_overrides: Values applied on top of Config (tests pass TESTING etc.)
        query_service: Pre-built service; when omitted the data sets are loaded
            from DATASET_PATH or the built-in sample

    Raises:
        ChargingApiError: If the configured data set is missing, empty or invalid
    """
    app = Flask(__name__)
    overrides = config_overrides or {}
    app.config.from_object(Config)
    app.config.update(overrides)
    configure_environment(app, overrides)

    configure_logging(app.config['LOG_LEVEL'])

    init_cache(app)
    limiter.init_app(app)

    app.extensions[QUERY_SERVICE_KEY] = query_service or build_query_service(app)

    register_cors(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_security_headers(app)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host=Config.FLASK_HOST, port=Config.FLASK_PORT, debug=app.config['DEBUG'])
