"""Shared fixtures: an application wired to a throwaway SQLite database."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from contact_api.config.settings import (  # noqa: E402
    DatabaseConfig,
    SecurityConfig,
    Settings,
)
from contact_api.main import create_app  # noqa: E402


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test SQLite file with cheap bcrypt rounds."""

    return Settings(
        log_file=str(tmp_path / "logs" / "app.log"),
        database=DatabaseConfig(
            dsn=f"sqlite+aiosqlite:///{tmp_path / 'contact_api.db'}",
            serverless=True,
        ),
        security=SecurityConfig(BCRYPT_ROUNDS=4),
    )


@pytest.fixture
def app(app_settings: Settings):
    application = create_app(app_settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Test client with startup (schema bootstrap) and shutdown events run."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_admin(client: TestClient) -> dict[str, str]:
    admin = {"name": "Ada", "email": "ada@example.com", "password": "secret1"}
    response = client.post("/api/admin/register", json=admin)
    assert response.status_code == 201
    return admin
