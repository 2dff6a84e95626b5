"""
Pytest fixtures for Backend API tests
"""

import pytest
from fastapi.testclient import TestClient

from backend_api.main import create_app
from backend_api.services.backend_service import BackendService
from backend_api.utils.config import BackendSettings


@pytest.fixture
def settings() -> BackendSettings:
    """Backend settings isolated from the process environment"""
    return BackendSettings(environment="Testing", log_level="WARNING", _env_file=None)


@pytest.fixture
def backend_service(settings) -> BackendService:
    return BackendService(settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client
