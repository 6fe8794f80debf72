"""HTTP tests for the health endpoint."""

from __future__ import annotations


def test_health_reports_database(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "db": "ok", "version": "dev"}


def test_health_rejects_other_methods(client):
    resp = client.post("/api/health")
    assert resp.status_code == 405
    assert resp.get_json()["err"] == "ERR_METHOD_NOT_ALLOWED"
