"""
Portfolio API — MongoDB Document Store
=======================================

What:  DocumentStore implementation backed by pymongo's AsyncMongoClient.
Why:   Keeps every bson/ObjectId detail inside one module; callers only see
       string identifiers and plain dicts.
How:   Wraps an AsyncDatabase handle. Identifiers are ObjectIds on the wire
       and 24-character hex strings everywhere else.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from portfolio_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)


def _to_public(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of `document` with its identifier rendered as a string."""
    doc = {**document}
    if "_id" in doc and not isinstance(doc["_id"], str):
        doc["_id"] = str(doc["_id"])
    return doc


class MongoDocumentStore(DocumentStore):
    """
    Document store over a single MongoDB database.

    The database handle comes from the process-wide client created in
    `portfolio_api.database`; the store itself holds no connection state.
    """

    def __init__(self, database: AsyncDatabase):
        self._db = database

    def is_valid_id(self, document_id: str) -> bool:
        return ObjectId.is_valid(document_id)

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Optional[str]:
        # insert_one mutates its argument with the generated _id
        result = await self._db[collection].insert_one({**document})
        if not result.acknowledged:
            logger.warning("Insert into '%s' was not acknowledged", collection)
            return None
        return str(result.inserted_id)

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        documents = await self._db[collection].find().to_list(length=None)
        return [_to_public(doc) for doc in documents]

    async def update_one(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> int:
        result = await self._db[collection].update_one(
            {"_id": ObjectId(document_id)},
            {"$set": fields},
        )
        return result.modified_count

    async def delete_one(self, collection: str, document_id: str) -> int:
        result = await self._db[collection].delete_one({"_id": ObjectId(document_id)})
        return result.deleted_count

    async def ping(self) -> bool:
        try:
            await self._db.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True
