from __future__ import annotations

import pytest

from jobboard.errors import DeleteBlockedError, DomainValidationError, NotFoundError, ReferenceNotFoundError
from jobboard.models import Job
from jobboard.resources import JOB_CATEGORIES, JOBS, RECRUITERS, RESOURCES
from jobboard.schemas import JobCategoryCreate, JobCreate
from jobboard.services.integrity import (
    NullReferenceValidator,
    StoreReferenceValidator,
    ensure_deletable,
    ensure_storable_references,
)
from jobboard.services.repository import ResourceRepository
from jobboard.services.resource_service import build_entity, create_resource, delete_resource


def _category(db):
    payload = JobCategoryCreate(name="Engineering", description="Engineering roles of all kinds")
    return ResourceRepository(db, JOB_CATEGORIES).create(build_entity(JOB_CATEGORIES, payload, "system"))


def _job_payload(category_id: int, **overrides) -> JobCreate:
    data = {
        "title": "Data Engineer",
        "description": "Own the ingestion pipelines end to end.",
        "recruiter_id": 1,
        "company_id": 1,
        "category_id": category_id,
        "location": "Remote",
        "job_type": "contract",
        "salary_min": 50000,
        "salary_max": 70000,
        "status": "draft",
    }
    data.update(overrides)
    return JobCreate(**data)


def test_store_validator_reports_first_missing_reference(db) -> None:
    category = _category(db)
    validator = StoreReferenceValidator(db, RESOURCES)

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        validator.validate(JOBS, _job_payload(category.id).model_dump())

    assert exc_info.value.field == "recruiter_id"
    assert exc_info.value.message == "recruiter not found"


def test_store_validator_skips_optional_reference_when_absent(db) -> None:
    validator = StoreReferenceValidator(db, RESOURCES)
    validator.validate(RECRUITERS, {"company_id": None})

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        validator.validate(RECRUITERS, {"company_id": 404})
    assert exc_info.value.message == "company not found"


def test_null_validator_accepts_anything() -> None:
    NullReferenceValidator().validate(JOBS, {"recruiter_id": 1, "company_id": 2, "category_id": 3})


def test_create_resource_with_null_validator_stores_dangling_ids(db) -> None:
    job = create_resource(db, JOBS, _job_payload(999), NullReferenceValidator(), "importer")
    assert job.id is not None
    assert job.category_id == 999
    assert job.created_by == "importer"


def test_cross_field_check_runs_before_any_insert(db) -> None:
    payload = _job_payload(1, salary_min=50000, salary_max=40000)

    with pytest.raises(DomainValidationError) as exc_info:
        create_resource(db, JOBS, payload, NullReferenceValidator(), "system")

    assert [e.field for e in exc_info.value.errors] == ["salary_max"]
    assert db.query(Job).count() == 0


def test_equal_salaries_are_accepted(db) -> None:
    job = create_resource(db, JOBS, _job_payload(1, salary_min=60000, salary_max=60000), NullReferenceValidator(), "system")
    assert job.salary_min == job.salary_max == 60000


def test_category_with_jobs_cannot_be_deleted(db) -> None:
    category = _category(db)
    job = create_resource(db, JOBS, _job_payload(category.id), NullReferenceValidator(), "system")

    with pytest.raises(DeleteBlockedError):
        ensure_deletable(db, RESOURCES, JOB_CATEGORIES, category.id)
    with pytest.raises(NotFoundError):
        delete_resource(db, RESOURCES, JOB_CATEGORIES, str(category.id))
    assert ResourceRepository(db, JOB_CATEGORIES).get_by_id(category.id).name == "Engineering"

    delete_resource(db, RESOURCES, JOBS, str(job.id))
    delete_resource(db, RESOURCES, JOB_CATEGORIES, str(category.id))
    with pytest.raises(NotFoundError):
        ResourceRepository(db, JOB_CATEGORIES).get_by_id(category.id)


def test_ensure_deletable_rejects_unparseable_id(db) -> None:
    with pytest.raises(NotFoundError):
        ensure_deletable(db, RESOURCES, JOB_CATEGORIES, "abc")


def test_resources_without_guards_are_always_deletable(db) -> None:
    ensure_deletable(db, RESOURCES, JOBS, "12345")


def test_unstorable_reference_is_rejected_before_lookup(db) -> None:
    with pytest.raises(ReferenceNotFoundError) as exc_info:
        StoreReferenceValidator(db, RESOURCES).validate(JOBS, {"recruiter_id": 10**30, "company_id": 1, "category_id": 1})
    assert exc_info.value.field == "recruiter_id"

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        ensure_storable_references(JOBS, {"recruiter_id": 1, "company_id": 2**63, "category_id": 3})
    assert exc_info.value.message == "company not found"

    ensure_storable_references(RECRUITERS, {"company_id": None})
    ensure_storable_references(JOBS, {"recruiter_id": 1, "company_id": 2, "category_id": 3})


def test_null_validator_create_rejects_unstorable_ids(db) -> None:
    with pytest.raises(ReferenceNotFoundError):
        create_resource(db, JOBS, _job_payload(10**30), NullReferenceValidator(), "system")
    assert db.query(Job).count() == 0
