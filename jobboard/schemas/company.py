# company.py
from typing import Optional
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobboard.schemas.common import AuditRead, validate_email_like, validate_url


class CompanyBase(BaseModel):
    name: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10)
    website: str
    email: str
    phone: str = Field(min_length=10)
    address: Optional[str] = None
    city: str = Field(min_length=1)
    postal_code: Optional[str] = None
    country: str = Field(min_length=1)
    logo_url: Optional[str] = None
    verified: bool = False
    active: bool = False

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return validate_email_like(v)

    @field_validator("website")
    @classmethod
    def _validate_website(cls, v: str) -> str:
        return validate_url(v)

    @field_validator("logo_url")
    @classmethod
    def _validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return validate_url(v)


class CompanyCreate(CompanyBase):
    pass


class CompanyRead(CompanyBase, AuditRead):
    created_time: datetime
