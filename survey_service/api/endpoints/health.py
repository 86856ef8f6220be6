"""
Health checks - for load balancers and Kubernetes probes.
Challenge: Liveness never touches the database; readiness is gated on a bounded ping.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from survey_service.config import get_settings
from survey_service.db.mongo import Mongo

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)
settings = get_settings()


@router.get("/health")
async def health():
    """Liveness: is the process up?"""
    return "OK"


@router.get("/ready")
async def ready(mongo: Mongo):
    """Readiness: does MongoDB answer a ping? Callers re-poll; no retry here."""
    if not await mongo.ping(settings.ready_timeout_seconds):
        logger.warning("Readiness check failed: MongoDB not reachable")
        return PlainTextResponse("Database not ready", status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return "READY"
