# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard.config import Settings, build_sqlalchemy_db_url, get_settings
from jobboard.database import Base, build_engine, build_session_factory
from jobboard.exception_handlers import register_exception_handlers
from jobboard.resources import RESOURCES
from jobboard.routers.health import router as health_router
from jobboard.routers.resources import build_nested_router, build_resource_router
import jobboard.models  # noqa: F401  # register every table on Base.metadata


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("jobboard").setLevel(level)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("starting %s %s (environment=%s)", settings.app_name, settings.version, settings.environment)
        yield
        # Runs after the server has drained in-flight requests.
        engine.dispose()
        logger.info("database connections closed")

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = build_session_factory(engine)
    application.state.resources = RESOURCES

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    application.include_router(health_router)
    for resource in RESOURCES.values():
        application.include_router(build_resource_router(resource))
    application.include_router(build_nested_router(RESOURCES))

    # Avoid accidental schema changes in shared MySQL databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application
