from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from jobboard.schemas.common import AuditRead, ProficiencyLevel


class JobSkillCreate(BaseModel):
    job_id: int
    skill_id: int
    proficiency_level_required: ProficiencyLevel
    is_required: bool = False


class JobSkillRead(JobSkillCreate, AuditRead):
    created_time: datetime


class JobSkillUpdate(BaseModel):
    proficiency_level_required: ProficiencyLevel | Literal[""] | None = None
