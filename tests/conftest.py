"""
Pytest fixtures - fake MongoDB handle and HTTP clients.
Challenge: Isolated tests; no real database in API tests.
"""

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import InsertOneResult

from survey_service.db.mongo import get_mongo
from survey_service.main import app


class FakeCollection:
    """In-memory stand-in for an AsyncCollection (insert_one only)."""

    def __init__(self, mongo: "FakeMongo"):
        self.mongo = mongo
        self.documents: list[dict] = []

    async def insert_one(self, document: dict) -> InsertOneResult:
        if not self.mongo.reachable:
            raise ServerSelectionTimeoutError("mongo-local:27017: connection refused")
        stored = {**document, "_id": ObjectId()}
        self.documents.append(stored)
        return InsertOneResult(stored["_id"], True)


class FakeMongo:
    """Stand-in for MongoConnection. Flip `reachable` to simulate an outage."""

    def __init__(self):
        self.reachable = True
        self.collections: dict[str, FakeCollection] = {}
        self.ping_timeouts: list[float] = []

    async def ping(self, timeout: float) -> bool:
        self.ping_timeouts.append(timeout)
        return self.reachable

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(self))

    @property
    def answers(self) -> list[dict]:
        return self.collection("answers").documents


@pytest.fixture
def mongo() -> FakeMongo:
    return FakeMongo()


@pytest.fixture
def override_mongo(mongo: FakeMongo):
    app.dependency_overrides[get_mongo] = lambda: mongo
    yield mongo
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_mongo: FakeMongo):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sync_client(override_mongo: FakeMongo) -> TestClient:
    """Sync client for pytest-bdd steps. Not used as a context manager, so the lifespan never runs."""
    return TestClient(app)
