from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Keep a developer's local .env from leaking into the test settings.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def settings(tmp_path) -> Any:
    from jobboard.config import Settings

    return Settings(db_url=f"sqlite:///{tmp_path / 'test.db'}", environment="test", log_level="WARNING")


@pytest.fixture()
def app(settings) -> Any:
    from jobboard.main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app) -> Any:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db(app) -> Any:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


class Seeder:
    """Creates entities through the public API and returns the response bodies."""

    def __init__(self, client: TestClient) -> None:
        self.client = client

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        r = self.client.post(path, json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    def company(self, **overrides: Any) -> dict[str, Any]:
        payload = {
            "name": "Acme Corp",
            "description": "Industrial supplies and anvils",
            "website": "https://acme.example.com",
            "email": "hr@acme.example.com",
            "phone": "+1 555 0100 200",
            "city": "Springfield",
            "postal_code": "49007",
            "country": "USA",
        }
        payload.update(overrides)
        return self._post("/companies", payload)

    def category(self, **overrides: Any) -> dict[str, Any]:
        payload = {"name": "Engineering", "description": "Software and hardware engineering roles"}
        payload.update(overrides)
        return self._post("/jobcategories", payload)

    def recruiter(self, **overrides: Any) -> dict[str, Any]:
        payload = {
            "first_name": "Rita",
            "last_name": "Recruiter",
            "email": "rita@acme.example.com",
            "password": "SecretPass123",
            "phone": "+1 555 0100 300",
        }
        payload.update(overrides)
        return self._post("/recruiters", payload)

    def candidate(self, **overrides: Any) -> dict[str, Any]:
        payload = {
            "first_name": "Carl",
            "last_name": "Candidate",
            "email": "carl@example.com",
            "password": "SecretPass123",
            "phone": "+1 555 0100 400",
            "location": "Berlin",
        }
        payload.update(overrides)
        return self._post("/candidates", payload)

    def skill(self, **overrides: Any) -> dict[str, Any]:
        payload = {"name": "Python", "description": "General purpose programming"}
        payload.update(overrides)
        return self._post("/skills", payload)

    def job_payload(self, recruiter_id: int, company_id: int, category_id: int, **overrides: Any) -> dict[str, Any]:
        payload = {
            "title": "Backend Engineer",
            "description": "Build and operate the job board REST API.",
            "recruiter_id": recruiter_id,
            "company_id": company_id,
            "category_id": category_id,
            "location": "Remote",
            "job_type": "full-time",
            "salary_min": 60000,
            "salary_max": 90000,
            "status": "active",
        }
        payload.update(overrides)
        return payload

    def job(self, recruiter_id: int, company_id: int, category_id: int, **overrides: Any) -> dict[str, Any]:
        return self._post("/jobs", self.job_payload(recruiter_id, company_id, category_id, **overrides))

    def job_graph(self) -> dict[str, dict[str, Any]]:
        company = self.company()
        category = self.category()
        recruiter = self.recruiter(company_id=company["id"])
        job = self.job(recruiter["id"], company["id"], category["id"])
        return {"company": company, "category": category, "recruiter": recruiter, "job": job}


@pytest.fixture()
def seed(client) -> Seeder:
    return Seeder(client)


@pytest.fixture()
def degraded_client(settings) -> Any:
    from jobboard.main import create_app

    app = create_app(settings.model_copy(update={"integrity_checks": False}))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def degraded_seed(degraded_client) -> Seeder:
    return Seeder(degraded_client)
