"""
Portfolio API — Abstract Document Store Interface
==================================================

What:  Abstract base class defining the storage primitives the CRUD layer needs.
Why:   Route handlers and services never touch the MongoDB client directly;
       they receive a DocumentStore through FastAPI dependency injection.
       Tests swap in an in-memory implementation without a running database.
How:   MongoDocumentStore implements the contract over pymongo's async client.

Identifiers:
    Identifiers are opaque strings to everything above this layer. Each
    implementation decides what a well-formed identifier looks like
    (`is_valid_id`) and renders stored identifiers back as strings.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DocumentStore(ABC):
    """
    Collection-level primitives used by ResourceService.

    Contract:
        - insert_one() returns the new identifier, or None when the storage
          did not acknowledge the write
        - find_all() returns every document with its identifier as a string
          under the "_id" key
        - update_one() / delete_one() return the number of documents the
          storage reports as modified / deleted
        - Driver exceptions propagate unchanged; the service layer wraps them
    """

    @abstractmethod
    def is_valid_id(self, document_id: str) -> bool:
        """True when `document_id` is well-formed for this store's identifier type."""
        ...

    @abstractmethod
    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Optional[str]:
        ...

    @abstractmethod
    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    async def update_one(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> int:
        """
        Merge `fields` onto the document with the given identifier.

        Only the supplied keys change; every other field keeps its value.

        Returns:
            int: Modified count (0 when nothing matched or nothing changed)
        """
        ...

    @abstractmethod
    async def delete_one(self, collection: str, document_id: str) -> int:
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Lightweight connectivity check.

        Who:     Called at startup and by the health check endpoint.
        Returns: True if the storage answered, False otherwise.
        """
        ...
