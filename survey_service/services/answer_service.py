"""
Answer service - submission use case (SOLID: Single Responsibility).
Design: Depends on the repository only; endpoints stay thin and tests swap the store.
"""

import logging

from survey_service.db.repositories.answer_repository import AnswerRepository
from survey_service.schemas.answer import AnswerIn

logger = logging.getLogger(__name__)


class AnswerService:
    """Handles answer submission: log the fields, write one document."""

    def __init__(self, answer_repo: AnswerRepository):
        self.answer_repo = answer_repo

    async def submit(self, answer: AnswerIn) -> str:
        """Store the answer and return its id as a string. Store errors propagate."""
        logger.info("answer1: %s", answer.answer1)
        logger.info("answer2: %s", answer.answer2)
        logger.info("answer3: %s", answer.answer3)
        inserted_id = await self.answer_repo.insert(answer)
        return str(inserted_id)
