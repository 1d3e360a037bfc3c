from datetime import datetime

from pydantic import BaseModel, Field

from jobboard.schemas.common import AuditRead


class JobCategoryCreate(BaseModel):
    name: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=500)


class JobCategoryRead(JobCategoryCreate, AuditRead):
    created_time: datetime
