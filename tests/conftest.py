"""
Pytest fixtures for the charging analytics API tests.
"""

import json
import os

import pytest

os.environ.setdefault('FLASK_ENV', 'testing')

from charging_api.app import create_app
from charging_api.fixtures import DAILY_SAMPLE, WEEKLY_SAMPLE, sample_datasets
from charging_api.services import QueryService

TEST_CONFIG = {
    'TESTING': True,
    'RATELIMIT_ENABLED': False,
    'DATASET_PATH': '',
}


@pytest.fixture
def app():
    """Create application for testing."""
    return create_app(TEST_CONFIG)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def datasets():
    """Validated sample data sets keyed by View."""
    return sample_datasets()


@pytest.fixture
def query_service(datasets):
    """QueryService over the sample data."""
    return QueryService(datasets)


@pytest.fixture
def fixture_payload():
    """Wire-format payload equal to the built-in sample."""
    return {
        'daily': [dict(row) for row in DAILY_SAMPLE],
        'weekly': [dict(row) for row in WEEKLY_SAMPLE],
    }


@pytest.fixture
def dataset_file(tmp_path, fixture_payload):
    """Write a fixture payload to a JSON file and return its path."""

    def _write(payload=None):
        path = tmp_path / 'charging.json'
        path.write_text(json.dumps(fixture_payload if payload is None else payload))
        return path

    return _write
