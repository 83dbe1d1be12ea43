"""
Portfolio API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Endpoint tests run against an in-memory DocumentStore injected through
       FastAPI's dependency overrides, so no MongoDB server is needed.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── memory_store: In-memory DocumentStore with ObjectId identifiers
    ├── mock_store: MagicMock/AsyncMock store for service unit tests
    ├── failing_store: Store whose every storage call raises
    └── test_client: HTTPX AsyncClient wired to the app with memory_store
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DB_URI"] = "mongodb://localhost:27017"
os.environ["DB_NAME"] = "portfolio-blog-test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from portfolio_api.database import get_optional_document_store
from portfolio_api.services.store_base import DocumentStore


class InMemoryDocumentStore(DocumentStore):
    """
    DocumentStore double keeping collections in dicts.

    Mirrors MongoDB's observable behavior for the calls the API makes:
    ObjectId hex identifiers, $set merge semantics, and a modified count
    of 0 when every supplied field already had the given value.
    """

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.acknowledge_writes = True
        self.calls: List[str] = []

    def _collection(self, name: str) -> Dict[str, Dict[str, Any]]:
        return self.collections.setdefault(name, {})

    def is_valid_id(self, document_id: str) -> bool:
        return ObjectId.is_valid(document_id)

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Optional[str]:
        self.calls.append("insert_one")
        if not self.acknowledge_writes:
            return None
        new_id = str(ObjectId())
        self._collection(collection)[new_id] = {"_id": new_id, **document}
        return new_id

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        self.calls.append("find_all")
        return [dict(doc) for doc in self._collection(collection).values()]

    async def update_one(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> int:
        self.calls.append("update_one")
        doc = self._collection(collection).get(document_id)
        if doc is None:
            return 0
        if all(doc.get(key) == value for key, value in fields.items()):
            return 0
        doc.update(fields)
        return 1

    async def delete_one(self, collection: str, document_id: str) -> int:
        self.calls.append("delete_one")
        if self._collection(collection).pop(document_id, None) is None:
            return 0
        return 1

    async def ping(self) -> bool:
        return True


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def mock_store():
    """
    Provides a mock DocumentStore for ResourceService unit tests.

    Usage:
        async def test_delete(mock_store):
            mock_store.delete_one.return_value = 1
            await service.delete(mock_store, str(ObjectId()))
    """
    store = MagicMock(spec=DocumentStore)
    store.is_valid_id = MagicMock(side_effect=ObjectId.is_valid)
    store.insert_one = AsyncMock(return_value=str(ObjectId()))
    store.find_all = AsyncMock(return_value=[])
    store.update_one = AsyncMock(return_value=1)
    store.delete_one = AsyncMock(return_value=1)
    store.ping = AsyncMock(return_value=True)
    return store


@pytest.fixture
def failing_store(mock_store):
    """A store whose storage calls all fail the way an unreachable cluster does."""
    error = ServerSelectionTimeoutError("localhost:27017: connection refused")
    mock_store.insert_one.side_effect = error
    mock_store.find_all.side_effect = error
    mock_store.update_one.side_effect = error
    mock_store.delete_one.side_effect = error
    mock_store.ping.return_value = False
    return mock_store


def _client_for(store: DocumentStore):
    from portfolio_api.main import app

    app.dependency_overrides[get_optional_document_store] = lambda: store
    transport = ASGITransport(app=app)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    HTTPX AsyncClient talking to the app, backed by `memory_store`.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/projects")
            assert response.status_code == 200
    """
    app, client = _client_for(memory_store)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(failing_store):
    """HTTPX AsyncClient whose document store raises on every call."""
    app, client = _client_for(failing_store)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_project():
    return {
        "title": "A",
        "image": "https://example.com/a.png",
        "live": "https://a.example.com",
        "code": "https://github.com/example/a",
        "description": "Portfolio site",
        "category": "Frontend",
    }


@pytest.fixture
def sample_blog():
    return {
        "title": "Old",
        "content": "Body text",
        "image": "https://example.com/cover.png",
        "category": "Technology",
    }
