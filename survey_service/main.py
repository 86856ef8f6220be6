"""
FastAPI application entry point.
Challenge: Open the shared MongoDB handle at startup without requiring the database to be up.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from survey_service.api.router import api_router
from survey_service.config import get_settings
from survey_service.db.mongo import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the client (fatal on bad config), ping once (not fatal). Shutdown: close it."""
    settings = get_settings()
    try:
        mongo = MongoConnection.connect(
            settings.mongo_uri,
            settings.connect_timeout_seconds,
            database=settings.mongo_database,
        )
    except Exception:
        logger.critical("Failed to connect to MongoDB at %s", settings.mongo_uri, exc_info=True)
        raise

    if await mongo.ping(settings.connect_timeout_seconds):
        logger.info("Connected to MongoDB successfully")
    else:
        # Keep serving; /ready reports the outage
        logger.warning("MongoDB not reachable at startup, readiness probe will handle it")

    app.state.mongo = mongo
    yield
    await mongo.close()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Survey service: one question, three-field answers stored in MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.include_router(api_router)

    return app


app = create_app()
