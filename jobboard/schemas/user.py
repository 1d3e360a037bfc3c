# user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jobboard.schemas.common import AuditRead, validate_email_like


class UserBase(BaseModel):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    email: str
    verified: bool = False
    active: bool = False
    terms_accepted: bool = False
    last_terms_accepted: Optional[datetime] = None
    last_login_time: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return validate_email_like(v)


class UserCreate(UserBase):
    password: str = Field(min_length=8)


class UserRead(UserBase, AuditRead):
    created_time: datetime
