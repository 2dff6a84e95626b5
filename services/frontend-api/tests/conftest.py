"""
Pytest fixtures for Frontend API tests
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from frontend_api.main import create_app
from frontend_api.utils.backend_client import BackendServiceClient
from frontend_api.utils.config import FrontendSettings


@pytest.fixture
def settings() -> FrontendSettings:
    """Frontend settings isolated from the process environment"""
    return FrontendSettings(
        environment="Testing",
        log_level="WARNING",
        backend_api_url="http://backend-api-svc",
        _env_file=None
    )


@pytest.fixture
def make_client(settings):
    """Build a TestClient whose backend calls go through the given httpx transport"""
    clients = []

    def factory(transport: httpx.AsyncBaseTransport) -> TestClient:
        backend_client = BackendServiceClient(
            base_url=settings.backend_api_url,
            transport=transport
        )
        test_client = TestClient(create_app(settings, backend_client=backend_client))
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield factory

    for test_client in clients:
        test_client.__exit__(None, None, None)
