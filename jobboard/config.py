from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=False)


# Store backends the service knows how to talk to. Anything else is a typo or an
# unsupported driver and must fail at startup rather than on the first request.
SUPPORTED_DB_SCHEMES = ("sqlite", "mysql+pymysql")


def _parse_origins(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple, set)):
        return [str(item).strip() for item in raw if str(item).strip()]
    s = str(raw).strip()
    if not s:
        return []
    # Support JSON array string or comma-separated string.
    if s.startswith("["):
        try:
            parsed = json.loads(s)
            items = parsed if isinstance(parsed, list) else [parsed]
        except ValueError:
            items = s.strip("[]").split(",")
    else:
        items = s.split(",")
    return [str(item).strip().strip('"') for item in items if str(item).strip()]


def validate_db_url(value: str) -> str:
    try:
        url = make_url(value)
    except ArgumentError as exc:
        raise ValueError(f"invalid DB_URL: {exc}") from exc
    if url.drivername not in SUPPORTED_DB_SCHEMES:
        raise ValueError(
            f"invalid DB_URL: scheme must be one of {', '.join(SUPPORTED_DB_SCHEMES)} (got '{url.drivername}')"
        )
    return value


class Settings(BaseSettings):
    app_name: str = Field(default="Job Board API")
    version: str = Field(default="1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")
    request_timeout: float = Field(default=30.0, validation_alias="TIMEOUT")
    shutdown_grace_seconds: int = Field(default=30, validation_alias="SHUTDOWN_GRACE_SECONDS")

    # Database configuration
    # DB_URL wins when set; otherwise the discrete DB_* settings are used outside development.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="jobs_db", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    # Domain behaviour
    # When false, foreign-key existence checks on create are skipped (degraded mode).
    integrity_checks: bool = Field(default=True, validation_alias="INTEGRITY_CHECKS")
    audit_actor: str = Field(default="system", validation_alias="AUDIT_ACTOR")

    # NoDecode hands the raw env string to the validator, so comma-separated values work.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("db_url")
    @classmethod
    def _validate_db_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return validate_db_url(v.strip())

    @field_validator("port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError(f"invalid port {v}: must be between 1 and 65535")
        return v

    @field_validator("request_timeout")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("TIMEOUT must be a positive number of seconds")
        return v

    @field_validator("shutdown_grace_seconds")
    @classmethod
    def _validate_grace(cls, v: int) -> int:
        if v < 0:
            raise ValueError("SHUTDOWN_GRACE_SECONDS must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"invalid LOG_LEVEL '{v}'")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    # In development, default to a local sqlite file unless explicitly configured.
    if settings.environment.lower() in {"development", "test"}:
        return "sqlite:///./jobboard.db"

    # NOTE: password may include special chars; prefer DB_URL for complex passwords.
    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )


def mask_db_url(db_url: str) -> str:
    try:
        return make_url(db_url).render_as_string(hide_password=True)
    except ArgumentError:
        return db_url
