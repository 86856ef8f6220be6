"""
Answer repository - write-only access to the answers collection.
Challenge: Every write is bounded by a timeout; nothing here retries.
"""

from typing import Any

import pymongo

from survey_service.schemas.answer import AnswerIn


class AnswerRepository:
    """Inserts answer documents. Records are never updated or deleted."""

    def __init__(self, collection: Any, timeout: float):
        self.collection = collection
        self.timeout = timeout

    async def insert(self, answer: AnswerIn) -> Any:
        """Persist one submission and return the store-assigned _id. Raises PyMongoError."""
        with pymongo.timeout(self.timeout):
            result = await self.collection.insert_one(answer.to_document())
        return result.inserted_id
