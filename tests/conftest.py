"""Shared test fixtures.

Every test gets its own SQLite file and its own app instance, so no state
leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from mylife.core.config import Settings
from mylife.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary SQLite DB, ignoring any local .env."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test_mylife.db'}",
        secret_key="test-secret-key",
    )


@pytest.fixture
def client(settings):
    """TestClient used as a context manager so startup creates the tables."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def signup(client):
    """Return a helper that registers a user and returns its auth headers."""

    def _signup(email: str, name: str | None = None, password: str = "secret123") -> dict:
        resp = client.post(
            "/api/auth/signup",
            json={"email": email, "name": name or email.split("@")[0], "password": password},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return {"user": body["user"], "headers": {"Authorization": f"Bearer {body['token']}"}}

    return _signup
