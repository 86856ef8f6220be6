"""
MongoDB connection management.
Challenge: One shared client for all requests; probes must never hang or crash the process.
Design: Handle created once in the app lifespan, injected into handlers via Depends (testable with a fake).
"""

import logging
from typing import Annotated, Any

import pymongo
from fastapi import Depends, Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoConnection:
    """Shared MongoDB client bound to one database."""

    def __init__(self, client: AsyncMongoClient, database: str):
        self.client = client
        self.database = database

    @classmethod
    def connect(cls, uri: str, timeout: float, database: str = "surveyDB") -> "MongoConnection":
        """Build the client. Raises ConfigurationError on a malformed URI (fatal at startup).

        The driver connects lazily, so an unreachable server is not an error here.
        """
        timeout_ms = int(timeout * 1000)
        client = AsyncMongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        return cls(client, database)

    async def ping(self, timeout: float) -> bool:
        """True if the server answers a ping within `timeout` seconds."""
        try:
            with pymongo.timeout(timeout):
                await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.debug("ping failed: %s", e)
            return False

    def collection(self, name: str) -> Any:
        return self.client[self.database][name]

    async def close(self) -> None:
        await self.client.close()


def get_mongo(request: Request) -> MongoConnection:
    """Connection created in the lifespan. Overridden in tests."""
    return request.app.state.mongo


# Type alias for FastAPI dependency injection
Mongo = Annotated[MongoConnection, Depends(get_mongo)]
