from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.config import Settings, build_sqlalchemy_db_url, mask_db_url
from jobboard.database import get_db
from jobboard.routers.dependencies import get_app_settings


router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    status: str
    version: str


class DBHealthStatus(BaseModel):
    orm: str
    db_url: str
    timestamp: datetime


@router.get("/health", response_model=HealthStatus, summary="API heartbeat")
def health_check(settings: Settings = Depends(get_app_settings)) -> HealthStatus:
    return HealthStatus(status="healthy", version=settings.version)


@router.get("/health/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> DBHealthStatus:
    orm_status = "ok"
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        orm_status = "error"

    return DBHealthStatus(
        orm=orm_status,
        db_url=mask_db_url(build_sqlalchemy_db_url(settings)),
        timestamp=datetime.now(timezone.utc),
    )
