"""Admin registration and login endpoints."""

from __future__ import annotations

import asyncio
import sqlite3

import pytest
from sqlalchemy.exc import OperationalError

from contact_api.database import get_session
from contact_api.services import AdminService
from contact_api.views import AdminRegisterRequest


def _admin_rows(client) -> list[tuple]:
    url = client.app.state.settings.database.dsn
    path = url.split("///", 1)[1]
    with sqlite3.connect(path) as conn:
        return conn.execute("SELECT id, name, email, password FROM admin").fetchall()


def test_register_returns_created_without_account_data(client):
    response = client.post(
        "/api/admin/register",
        json={"name": "A", "email": "a@x.com", "secret": "secret1"},
    )

    assert response.status_code == 201
    assert response.json() == {
        "success": True,
        "message": "Admin registered successfully",
    }


def test_register_stores_bcrypt_hash_not_plaintext(client):
    client.post(
        "/api/admin/register",
        json={"name": "A", "email": "a@x.com", "password": "secret1"},
    )

    rows = _admin_rows(client)
    assert len(rows) == 1
    _, name, email, stored = rows[0]
    assert (name, email) == ("A", "a@x.com")
    assert stored != "secret1"
    assert stored.startswith("$2b$04$")


def test_register_same_email_twice_conflicts(client):
    payload = {"name": "A", "email": "a@x.com", "secret": "secret1"}

    first = client.post("/api/admin/register", json=payload)
    second = client.post("/api/admin/register", json=payload)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json() == {
        "success": False,
        "message": "Admin already exists",
        "error": "Admin already exists",
    }


def test_unique_constraint_reports_conflict_when_precheck_misses(client, monkeypatch):
    async def never_exists(self, email):
        return False

    monkeypatch.setattr(AdminService, "email_exists", never_exists)
    payload = {"name": "A", "email": "a@x.com", "secret": "secret1"}

    assert client.post("/api/admin/register", json=payload).status_code == 201
    response = client.post("/api/admin/register", json=payload)

    assert response.status_code == 409
    assert response.json()["message"] == "Admin already exists"
    assert len(_admin_rows(client)) == 1


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"email": "a@x.com", "password": "secret1"}, '"name" is required'),
        ({"name": "A", "password": "secret1"}, '"email" is required'),
        ({"name": "A", "email": "a@x.com"}, '"password" is required'),
        (
            {"name": "A", "email": "not-an-email", "password": "secret1"},
            '"email" must be a valid email',
        ),
        (
            {"name": "A", "email": "a@x.com", "password": "12345"},
            '"password" length must be at least 6 characters long',
        ),
        (
            {"name": "", "email": "a@x.com", "password": "secret1"},
            '"name" is not allowed to be empty',
        ),
    ],
)
def test_register_rejects_invalid_payload(client, payload, message):
    response = client.post("/api/admin/register", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": message, "error": message}
    assert _admin_rows(client) == []


def test_register_rejects_unknown_fields(client):
    response = client.post(
        "/api/admin/register",
        json={"name": "A", "email": "a@x.com", "password": "secret1", "role": "root"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == '"role" is not allowed'


def test_login_with_correct_secret_returns_public_profile(client, registered_admin):
    response = client.post(
        "/api/admin/login",
        json={"email": registered_admin["email"], "secret": registered_admin["password"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert set(body["admin"]) == {"id", "name", "email"}
    assert body["admin"]["name"] == "Ada"
    assert body["admin"]["email"] == "ada@example.com"
    assert isinstance(body["admin"]["id"], int)


def test_login_failures_are_indistinguishable(client, registered_admin):
    wrong_secret = client.post(
        "/api/admin/login",
        json={"email": registered_admin["email"], "password": "wrong-secret"},
    )
    unknown_email = client.post(
        "/api/admin/login",
        json={"email": "nobody@example.com", "password": "wrong-secret"},
    )

    assert wrong_secret.status_code == unknown_email.status_code == 401
    assert wrong_secret.json() == unknown_email.json() == {
        "success": False,
        "message": "Invalid email or password",
        "error": "Invalid email or password",
    }


def test_login_requires_non_empty_secret(client):
    response = client.post(
        "/api/admin/login", json={"email": "a@x.com", "password": ""}
    )

    assert response.status_code == 400
    assert response.json()["message"] == '"password" is not allowed to be empty'


@pytest.mark.parametrize(
    "email",
    ["not-an-email", "Eve <eve@x.com>", "eve@"],
)
def test_login_rejects_malformed_email(client, email):
    response = client.post("/api/admin/login", json={"email": email, "password": "secret1"})

    assert response.status_code == 400
    assert response.json()["message"] == '"email" must be a valid email'


def test_login_requires_email(client):
    response = client.post("/api/admin/login", json={"password": "secret1"})

    assert response.status_code == 400
    assert response.json()["message"] == '"email" is required'


def test_register_rejects_display_name_email(client):
    response = client.post(
        "/api/admin/register",
        json={"name": "Eve", "email": "Eve <eve@x.com>", "password": "secret1"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == '"email" must be a valid email'
    assert _admin_rows(client) == []


class BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    async def commit(self):
        return None

    async def rollback(self):
        return None


async def broken_session():
    yield BrokenSession()


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/admin/register", {"name": "A", "email": "a@x.com", "password": "secret1"}),
        ("/api/admin/login", {"email": "a@x.com", "password": "secret1"}),
    ],
)
def test_store_failure_is_reported_as_server_error(app, client, path, payload):
    app.dependency_overrides[get_session] = broken_session

    response = client.post(path, json=payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Server error"
    assert "connection lost" in body["error"]


def test_register_releases_connection_before_hashing(monkeypatch):
    events: list[str] = []

    class EmptyResult:
        def first(self):
            return None

    class RecordingSession:
        async def execute(self, statement, *args, **kwargs):
            events.append(f"execute:{statement.__visit_name__}")
            return EmptyResult()

        async def commit(self):
            events.append("commit")

        async def rollback(self):
            events.append("rollback")

    def fake_hash(password, rounds=None):
        events.append("hash")
        return "$2b$04$hashed"

    monkeypatch.setattr("contact_api.services.admins.hash_password", fake_hash)
    service = AdminService(RecordingSession(), bcrypt_rounds=4)
    payload = AdminRegisterRequest(name="A", email="a@x.com", password="secret1")

    asyncio.run(service.register(payload))

    assert events == [
        "execute:select",
        "rollback",
        "hash",
        "execute:insert",
        "commit",
    ]
