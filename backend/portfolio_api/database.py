"""
Portfolio API — Database Connection Management
===============================================

What:  Process-wide MongoDB client, the DocumentStore built on it, and the
       FastAPI dependency that hands the store to route handlers.
Why:   Centralizes all connection logic in one place.
How:   init_document_store() creates the client once during app startup and
       pings the deployment. Handlers receive the store via
       Depends(get_document_store), never through a module global.
When:  Client is created in the lifespan; reused by every request.

Connection Lifecycle:
    The client is long-lived and shared by all requests. It is not closed
    on shutdown; the process exit releases its sockets.

Client Options:
    server_api:  Stable API v1, strict, deprecation errors on. Commands
                 outside the stable API fail instead of silently drifting.
    tz_aware:    createdAt values come back as aware UTC datetimes.
"""

import logging
from typing import Optional

from fastapi import Depends
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from portfolio_api.config import settings
from portfolio_api.exceptions import DatabaseError
from portfolio_api.services.mongo_store import MongoDocumentStore
from portfolio_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

_client: Optional[AsyncMongoClient] = None
_store: Optional[DocumentStore] = None


def create_client() -> AsyncMongoClient:
    """Build the MongoDB client with the configured Stable API settings."""
    return AsyncMongoClient(
        settings.db_uri,
        server_api=ServerApi(
            settings.db_server_api_version,
            strict=True,
            deprecation_errors=True,
        ),
        tz_aware=True,
    )


async def init_document_store() -> Optional[DocumentStore]:
    """
    Create the shared client and store, then ping the deployment.

    What:    Called once from the application lifespan.
    Returns: The process-wide DocumentStore, or None when the client could
             not be built from the configuration.

    Neither a rejected DB_URI nor a failed ping stops startup. Without a
    store, requests that need the database fail with 500; after a failed
    ping the client reconnects on the next operation. /health reports the
    database state in both cases.
    """
    global _client, _store
    if _store is not None:
        return _store

    try:
        _client = create_client()
        _store = MongoDocumentStore(_client[settings.db_name])
    except PyMongoError as e:
        logger.error("Could not create the MongoDB client: %s", str(e))
        _client = None
        _store = None
        return None

    if await _store.ping():
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    else:
        logger.error("MongoDB deployment did not answer the startup ping")
    return _store


def get_optional_document_store() -> Optional[DocumentStore]:
    """The shared document store, or None when startup could not create it."""
    return _store


def get_document_store(
    store: Optional[DocumentStore] = Depends(get_optional_document_store),
) -> DocumentStore:
    """
    FastAPI dependency that provides the shared document store.

    Example usage in a route:
        @router.get("/projects")
        async def list_projects(store: DocumentStore = Depends(get_document_store)):
            ...

    Tests substitute a store by overriding get_optional_document_store.

    Raises:
        DatabaseError: No store exists (startup did not run or rejected DB_URI).
    """
    if store is None:
        raise DatabaseError(
            message="Internal server error",
            context={"reason": "document store not initialized"},
        )
    return store
