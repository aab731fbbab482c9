"""Integration test fixtures: real app, in-memory database, HTTP test client."""
import pytest

PASSWORD = "password123"


@pytest.fixture
def register(client):
    """Register a user and return its auth headers."""

    def _register(email="seeker@example.com"):
        response = client.post("/api/auth/register", json={"email": email, "password": PASSWORD})
        assert response.status_code == 201, response.json
        return {"Authorization": f"Bearer {response.json['token']}"}

    return _register


@pytest.fixture
def auth_headers(register):
    return register()
