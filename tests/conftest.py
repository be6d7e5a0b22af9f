import pytest
from fastapi.testclient import TestClient

from bodytrack.core.config import Settings
from bodytrack.main import create_application


@pytest.fixture
def settings():
    return Settings(_env_file=None, data_backend="memory", environment="test", build_number="42")


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    return TestClient(app)
