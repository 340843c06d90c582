import pytest
from fastapi.testclient import TestClient

from doubles.main import app


@pytest.fixture(name="client")
def client_fixture():
    """Provide a test client for the stateless scheduling API"""
    with TestClient(app) as client:
        yield client
