# job.py
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from jobboard.errors import FieldError
from jobboard.schemas.common import AuditRead


JobType = Literal["full-time", "part-time", "contract", "freelance"]
JobStatus = Literal["active", "closed", "draft"]


class JobCreate(BaseModel):
    title: str = Field(min_length=5, max_length=255)
    description: str = Field(min_length=20)
    recruiter_id: int
    company_id: int
    category_id: int
    location: str = Field(min_length=3)
    job_type: JobType
    salary_min: int = Field(gt=0)
    salary_max: int = Field(gt=0)
    status: JobStatus
    active: bool = False


class JobRead(JobCreate, AuditRead):
    created_time: datetime


def check_salary_range(payload: JobCreate) -> list[FieldError]:
    if payload.salary_max < payload.salary_min:
        return [FieldError("salary_max", "must be greater than or equal to salary_min")]
    return []
