# candidate.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jobboard.schemas.common import AuditRead, validate_email_like


class CandidateBase(BaseModel):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    email: str
    phone: str = Field(min_length=10)
    location: Optional[str] = None
    verified: bool = False
    active: bool = False

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return validate_email_like(v)


class CandidateCreate(CandidateBase):
    password: str = Field(min_length=8)


class CandidateRead(CandidateBase, AuditRead):
    created_time: datetime
