"""Run the API server: ``python -m jobboard``."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from jobboard.config import get_settings
from jobboard.main import create_app


logger = logging.getLogger("jobboard")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.critical("invalid configuration, refusing to start:\n%s", exc)
        return 1

    app = create_app(settings)
    # uvicorn stops accepting connections on SIGINT/SIGTERM, waits up to the grace
    # period for in-flight requests, then runs the lifespan shutdown (engine dispose).
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
