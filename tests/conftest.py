"""
pytest configuration and fixtures.

Every test gets its own application and user directory, so state
created by one test never leaks into another.
"""

from typing import Iterator

import pytest
import requests
from fastapi.testclient import TestClient

from health_data_api.app.core.config import Settings
from health_data_api.app.main import create_app
from health_data_api.app.services.user_service import UserDirectory

JOHN = {"id": 1, "name": "John Doe", "age": 30, "weight": 75, "height": 180}
JANE = {"id": 2, "name": "Jane", "age": 25, "weight": 60, "height": 165}


@pytest.fixture
def settings() -> Settings:
    """Default settings with a known CORS origin."""
    return Settings(cors_origin="http://localhost/", docs_url="/api-docs")


@pytest.fixture
def directory() -> UserDirectory:
    """Freshly seeded user directory."""
    return UserDirectory()


@pytest.fixture
def app(settings, directory):
    return create_app(settings=settings, directory=directory)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


class RequestsBridge:
    """``requests.Session`` stand‑in that routes calls to a ``TestClient``."""

    def __init__(self, test_client: TestClient, base_url: str) -> None:
        self.test_client = test_client
        self.base_url = base_url
        self.calls = []

    def request(self, method, url, json=None, timeout=None, **kwargs) -> requests.Response:
        self.calls.append((method, url, json))
        path = url[len(self.base_url):]
        result = self.test_client.request(method, path, json=json)
        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.headers.update(result.headers)
        response.url = url
        response.reason = result.reason_phrase
        return response


@pytest.fixture
def api_session(client) -> RequestsBridge:
    return RequestsBridge(client, "http://testserver")
