"""
Pytest fixtures for the subscription manager.
Each test gets an app bound to a fresh SQLite file under tmp_path, a plain
client, and a client that has already logged in.
"""
from pathlib import Path

import pytest

from app import create_app


@pytest.fixture
def owner() -> dict:
    """Login credentials of the single application user."""
    return {"email": "owner@example.com", "password": "s3cret-pass"}


@pytest.fixture
def app(tmp_path: Path, owner: dict):
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATABASE": str(tmp_path / "test_subscriptions.db"),
        "DEFAULT_USER_EMAIL": owner["email"],
        "DEFAULT_USER_PASSWORD": owner["password"],
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client, owner: dict):
    """Client carrying a valid session cookie."""
    res = client.post("/api/login", json=owner)
    assert res.status_code == 200
    return client


@pytest.fixture
def entry_data() -> dict:
    return {
        "gmail": "customer@gmail.com",
        "password": "Zoom#2025",
        "startDate": "2025-01-01",
        "endDate": "2025-01-15",
        "accountNo": "1",
        "mobileNumber": "01712345678",
    }
