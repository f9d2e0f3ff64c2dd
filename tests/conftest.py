import pytest
from fastapi.testclient import TestClient

from profiles.api.dependencies import get_registry
from profiles.api.main import app
from profiles.registry import PersonRegistry
from profiles.utils.monitoring import MonitoringService


@pytest.fixture
def people():
    return PersonRegistry(separator=",", metrics=MonitoringService())


@pytest.fixture
def client(people):
    app.dependency_overrides[get_registry] = lambda: people
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

