from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from jobboard.schemas.common import AuditRead, ProficiencyLevel


class CandidateSkillCreate(BaseModel):
    candidate_id: int
    skill_id: int
    proficiency_level: ProficiencyLevel


class CandidateSkillRead(CandidateSkillCreate, AuditRead):
    created_time: datetime


class CandidateSkillUpdate(BaseModel):
    # Empty or missing is passed through; the repository rejects it as not found.
    proficiency_level: ProficiencyLevel | Literal[""] | None = None
