"""
Survey endpoints - the question and answer submission.
Challenge: Lenient input (bad bodies are stored as empty answers), fixed plaintext errors.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from survey_service.config import get_settings
from survey_service.db.mongo import Mongo, MongoConnection
from survey_service.db.repositories.answer_repository import AnswerRepository
from survey_service.schemas.answer import AnswerIn
from survey_service.services.answer_service import AnswerService

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()

QUESTION = "What is your favorite programming language framework?"


def _get_answer_service(mongo: MongoConnection) -> AnswerService:
    """Factory for service with repository injection (Dependency Inversion)."""
    collection = mongo.collection(settings.mongo_collection)
    return AnswerService(AnswerRepository(collection, settings.write_timeout_seconds))


@router.get("/")
async def get_question() -> str:
    """The survey question as a JSON string. Request input is ignored."""
    return QUESTION


@router.post("/", response_model=None)
async def submit_answer(request: Request, mongo: Mongo) -> str | PlainTextResponse:
    """Store one answer; returns the new record id as a JSON string."""
    answer = AnswerIn.from_body(await request.body())
    svc = _get_answer_service(mongo)
    try:
        return await svc.submit(answer)
    except PyMongoError as e:
        logger.error("insert answer failed: %s", e)
        return PlainTextResponse("Database error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
