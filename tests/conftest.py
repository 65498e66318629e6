import pytest
from fastapi.testclient import TestClient

from maintenance_tracker.api.deps import get_request_store
from maintenance_tracker.main import app
from maintenance_tracker.services.request_store import MaintenanceRequestStore


@pytest.fixture(name="store")
def store_fixture():
    """Create an empty request store."""
    return MaintenanceRequestStore()


@pytest.fixture(name="client")
def client_fixture(store: MaintenanceRequestStore):
    """Create a test client whose endpoints use the test store."""
    def get_request_store_override():
        return store

    app.dependency_overrides[get_request_store] = get_request_store_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="boiler_request")
def boiler_request_fixture(store: MaintenanceRequestStore):
    """Create a pending boiler ticket."""
    return store.create(asset="Boiler", description="Leaking")
