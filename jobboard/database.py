# database.py
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobboard.config import Settings, build_sqlalchemy_db_url, mask_db_url


logger = logging.getLogger(__name__)

Base = declarative_base()


def _build_connect_args(db_url: str, timeout: float) -> dict:
    if db_url.startswith("sqlite"):
        # Requests run on a worker thread pool, so the sqlite connection must be shareable.
        return {"check_same_thread": False, "timeout": timeout}
    seconds = max(1, int(timeout))
    return {"connect_timeout": seconds, "read_timeout": seconds, "write_timeout": seconds}


def build_engine(settings: Settings) -> Engine:
    db_url = build_sqlalchemy_db_url(settings)
    engine_kwargs: dict = {}
    if not db_url.startswith("sqlite"):
        engine_kwargs["pool_timeout"] = settings.request_timeout
    engine = create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
        connect_args=_build_connect_args(db_url, settings.request_timeout),
        **engine_kwargs,
    )
    logger.info("SQLAlchemy ORM db_url=%s", mask_db_url(db_url))
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def get_db(request: Request) -> Generator[Session, None, None]:
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
