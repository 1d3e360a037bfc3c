# dependencies.py
from typing import Mapping

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from jobboard.config import Settings
from jobboard.database import get_db
from jobboard.services.integrity import NullReferenceValidator, ReferenceValidator, StoreReferenceValidator
from jobboard.services.resource import Resource


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> Mapping[str, Resource]:
    return request.app.state.resources


def get_reference_validator(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    registry: Mapping[str, Resource] = Depends(get_registry),
) -> ReferenceValidator:
    if not settings.integrity_checks:
        return NullReferenceValidator()
    return StoreReferenceValidator(db, registry)
