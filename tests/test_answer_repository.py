"""
AnswerRepository tests - inserts are bounded by the write timeout.
"""

import time

import pytest
from pymongo.errors import PyMongoError

from survey_service.api.endpoints import survey
from survey_service.db.mongo import MongoConnection
from survey_service.db.repositories.answer_repository import AnswerRepository
from survey_service.schemas.answer import AnswerIn

UNREACHABLE_URI = "mongodb://127.0.0.1:1/?directConnection=true"


@pytest.mark.asyncio
async def test_insert_gives_up_after_timeout():
    """The write bound wins over the 10s connect timeout of the client."""
    mongo = MongoConnection.connect(UNREACHABLE_URI, 10)
    repo = AnswerRepository(mongo.collection("answers"), timeout=0.5)
    try:
        started = time.monotonic()
        with pytest.raises(PyMongoError):
            await repo.insert(AnswerIn(answer1="Go"))
        assert time.monotonic() - started < 5
    finally:
        await mongo.close()


def test_submit_uses_five_second_write_bound(mongo):
    svc = survey._get_answer_service(mongo)
    assert svc.answer_repo.timeout == 5
    assert svc.answer_repo.collection is mongo.collection("answers")
