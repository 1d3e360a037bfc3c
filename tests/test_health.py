from __future__ import annotations


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy", "version": "1.0"}


def test_health_db(client) -> None:
    r = client.get("/health/db")
    assert r.status_code == 200
    body = r.json()
    assert body["orm"] == "ok"
    assert body["db_url"].startswith("sqlite:///")
    assert body["timestamp"]
