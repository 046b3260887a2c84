"""
Test health endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from kura_translator.api.app import create_app
from kura_translator.service import TranslationService


@pytest.fixture
def client(manager):
    """Create a test client."""
    app = create_app(TranslationService(manager))
    return TestClient(app)


def test_health_check(client):
    """Test basic health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "keystore.item" in data["categories"]
