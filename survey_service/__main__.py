"""
Process entry point: `python -m survey_service` or the `survey-service` script.
Runs uvicorn until the socket fails; startup errors exit non-zero.
"""

import logging
import sys

import uvicorn

from survey_service.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # An empty SERVER_PORT binds an ephemeral port
    try:
        port = int(settings.server_port or 0)
    except ValueError:
        logger.critical("Invalid SERVER_PORT %r: cannot listen", settings.server_port)
        sys.exit(1)

    logger.info("Starting server on port %s...", settings.server_port)
    uvicorn.run(
        "survey_service.main:app",
        host="0.0.0.0",
        port=port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
