"""End-to-end tests for the health endpoint."""

import pytest
from fastapi.testclient import TestClient

from ask.interface.api.app import create_app
from ask.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["search_configured"] is True
