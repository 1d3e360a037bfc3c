# application.py
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from jobboard.schemas.common import AuditRead


ApplicationStatus = Literal["applied", "under_review", "rejected", "accepted", "withdrawn"]


class ApplicationCreate(BaseModel):
    job_id: int
    candidate_id: int
    status: ApplicationStatus
    recruiter_note: Optional[str] = None


class ApplicationRead(ApplicationCreate, AuditRead):
    applied_time: datetime


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus | Literal[""] | None = None
