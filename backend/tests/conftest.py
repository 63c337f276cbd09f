"""
ArticleHub Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped):
    ├── mock_collection: MagicMock standing in for an AsyncIOMotorCollection
    ├── sample_article_doc: A stored article document with a real ObjectId
    ├── app: Fresh FastAPI app with the collection dependency overridden
    └── test_client: HTTPX AsyncClient bound to that app

No MongoDB server is needed: ASGITransport does not run the lifespan, so the
Motor client is never created, and every route receives `mock_collection`.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set before any articlehub import so the settings singleton picks them up
os.environ["DB_URL"] = "mongodb://localhost:27017"
os.environ["DB_NAME"] = "articles_test"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_collection():
    """
    Provides a mock Motor collection.

    `find()` is synchronous in Motor and returns a cursor whose `to_list()`
    is awaited; the coroutine methods are AsyncMocks.

    Usage:
        async def test_list(mock_collection):
            mock_collection.find.return_value.to_list.return_value = [doc]
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    return collection


@pytest.fixture
def sample_article_doc():
    """A stored article document as MongoDB returns it."""
    return {
        "_id": ObjectId("65a1f0c2e4b0a1b2c3d4e5f6"),
        "title": "Building APIs in Go",
        "desc": "REST API walkthrough",
        "content": "Routers, handlers and a document store.",
    }


@pytest.fixture
def app(mock_collection):
    """FastAPI app whose routes receive `mock_collection`."""
    from articlehub.database import get_articles_collection
    from articlehub.main import create_app

    application = create_app()
    application.dependency_overrides[get_articles_collection] = lambda: mock_collection
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
