"""Shared fixtures: in-memory Mongo (mongomock-motor) and an ASGI test client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from config import DATABASE_NAME, REVIEW_COLLECTION
from app.services.review_store import ReviewStore
from main import app


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def collection(mongo_client):
    return mongo_client[DATABASE_NAME][REVIEW_COLLECTION]


@pytest.fixture
def store(collection):
    return ReviewStore(collection)


@pytest.fixture
def unavailable_collection():
    """Collection whose every call fails as if the server were unreachable."""
    down = ServerSelectionTimeoutError("No servers found yet")
    cursor = MagicMock()
    cursor.to_list = AsyncMock(side_effect=down)
    collection = MagicMock()
    collection.insert_one = AsyncMock(side_effect=down)
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
async def client(mongo_client):
    """Test client wired to the in-memory store through app.state."""
    app.state.mongo_client = mongo_client
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
