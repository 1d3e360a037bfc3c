from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobboard.schemas.common import AuditRead, validate_url


class ResumeCreate(BaseModel):
    candidate_id: int
    file_url: str
    file_name: str = Field(min_length=3)

    @field_validator("file_url")
    @classmethod
    def _validate_file_url(cls, v: str) -> str:
        return validate_url(v)


class ResumeRead(ResumeCreate, AuditRead):
    uploaded_time: datetime
