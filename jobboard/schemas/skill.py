from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from jobboard.schemas.common import AuditRead


class SkillCreate(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class SkillRead(SkillCreate, AuditRead):
    created_time: datetime
