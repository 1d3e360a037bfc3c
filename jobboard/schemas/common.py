from __future__ import annotations

from datetime import datetime
from typing import Generic, Literal, TypeVar
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict


T = TypeVar("T")

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


def validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("Invalid email format")
    left, right = value.split("@", 1)
    if not left or not right or "." not in right or " " in value:
        raise ValueError("Invalid email format")
    return value


def validate_url(v: str) -> str:
    value = (v or "").strip()
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("Invalid URL")
    return value


class FieldErrorItem(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    errors: list[FieldErrorItem]


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class PaginatedResponse(BaseModel, Generic[T]):
    data: list[T]
    pagination: PaginationMeta


class AuditRead(BaseModel):
    id: int
    updated_time: datetime
    created_by: str
    updated_by: str

    model_config = ConfigDict(from_attributes=True)
