"""Operational endpoints and the shared error envelope."""

from __future__ import annotations

import sqlite3

from prometheus_client import REGISTRY

from contact_api.middleware import UNMATCHED_ROUTE


def test_root_reports_service(client, app_settings):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["version"] == app_settings.app_version


def test_health_pings_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"
    assert response.json()["status"] == "healthy"


def test_metrics_count_contact_submissions(client):
    client.post(
        "/api/contact",
        json={"name": "B", "email": "b@x.com", "subject": "Hi", "message": "Hello"},
    )

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "app_contact_submissions_total" in response.text
    assert "http_requests_total" in response.text


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Not Found",
        "error": "Not Found",
    }


def test_schema_bootstrap_creates_both_tables(client):
    path = client.app.state.settings.database.dsn.split("///", 1)[1]
    with sqlite3.connect(path) as conn:
        tables = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        }

    assert {"admin", "contact"} <= tables


def _request_count(route: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "http_requests_total",
        {"method": "GET", "route": route, "status": status},
    )
    return value or 0.0


def test_unknown_paths_share_one_metric_series(client):
    before = _request_count(UNMATCHED_ROUTE, "404")

    for index in range(5):
        assert client.get(f"/scan/{index}").status_code == 404

    assert _request_count(UNMATCHED_ROUTE, "404") == before + 5
    assert REGISTRY.get_sample_value(
        "http_requests_total",
        {"method": "GET", "route": "/scan/0", "status": "404"},
    ) is None


def test_matched_routes_are_labelled_by_template(client):
    before = _request_count("/api/contact", "200")

    client.get("/api/contact")

    assert _request_count("/api/contact", "200") == before + 1
