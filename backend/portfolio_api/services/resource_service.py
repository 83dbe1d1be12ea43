"""
Portfolio API — Generic Resource Service (CRUD Logic)
======================================================

What:  The one CRUD pattern shared by projects, blog posts and messages.
Why:   All resources perform the same single-call operations against their
       own collection; only the collection name, the wording of messages and
       the document model differ.
How:   One ResourceService instance per resource. Each method receives the
       DocumentStore (injected by FastAPI), performs exactly one storage
       call, and returns a response envelope or raises an application
       exception for the global handlers.

Error Handling Strategy:
    Client mistakes (malformed id, empty update) raise ValidationError
    before the storage is touched. Anything the storage raises is logged
    with its type and wrapped in DatabaseError so the client only ever sees
    a generic 500 message.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type

from portfolio_api.config import settings
from portfolio_api.exceptions import (
    DatabaseError,
    NotFoundError,
    ValidationError,
    WriteNotAcknowledgedError,
)
from portfolio_api.schemas.blog import BlogDocument
from portfolio_api.schemas.common import (
    CreatedResponse,
    ListResponse,
    StatusResponse,
    StoredDocument,
)
from portfolio_api.schemas.message import MessageDocument
from portfolio_api.schemas.project import ProjectDocument
from portfolio_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResourceService:
    """
    CRUD operations for one document collection.

    Attributes:
        collection:     Collection name in the document store
        name:           Singular resource name used in messages ("project")
        plural:         Plural resource name used in messages ("projects")
        document_model: Pydantic model for stored documents in list responses
    """

    def __init__(
        self,
        collection: str,
        name: str,
        plural: str,
        document_model: Type[StoredDocument],
    ):
        self.collection = collection
        self.name = name
        self.plural = plural
        self.document_model = document_model

    # ── Create ────────────────────────────────────────────────────────────

    async def create(self, store: DocumentStore, fields: Dict[str, Any]) -> CreatedResponse:
        """
        Stamp `fields` with createdAt and insert them as a new document.

        Raises:
            WriteNotAcknowledgedError: Storage did not acknowledge the insert (→ 400)
            DatabaseError: Storage call failed (→ 500)
        """
        document = {**fields, "createdAt": utc_now()}
        try:
            new_id = await store.insert_one(self.collection, document)
        except Exception as e:
            raise self._storage_failure("create", e)

        if new_id is None:
            raise WriteNotAcknowledgedError(resource=self.name)

        logger.info("Created %s %s", self.name, new_id)
        return CreatedResponse(
            message=f"{self.name.capitalize()} created successfully",
            id=new_id,
        )

    # ── List ──────────────────────────────────────────────────────────────

    async def list_all(self, store: DocumentStore) -> ListResponse:
        """Every document in the collection, no filtering or pagination."""
        try:
            documents = await store.find_all(self.collection)
        except Exception as e:
            raise self._storage_failure("list", e)

        return ListResponse[self.document_model](
            message=f"{self.plural.capitalize()} retrieved successfully",
            data=documents,
        )

    # ── Update ────────────────────────────────────────────────────────────

    async def update(
        self,
        store: DocumentStore,
        document_id: str,
        fields: Optional[Dict[str, Any]],
    ) -> StatusResponse:
        """
        Merge `fields` onto the document and refresh its createdAt.

        Raises:
            ValidationError: Malformed id or no fields to change (→ 400)
            NotFoundError: No document matched, or nothing changed (→ 404)
            DatabaseError: Storage call failed (→ 500)
        """
        self._check_id(store, document_id)
        if not fields:
            raise ValidationError(
                message="No fields provided for update",
                field="body",
            )

        changes = {**fields, "createdAt": utc_now()}
        try:
            modified = await store.update_one(self.collection, document_id, changes)
        except Exception as e:
            raise self._storage_failure("update", e, document_id)

        if modified == 0:
            raise NotFoundError(
                resource=self.name,
                resource_id=document_id,
                message=f"{self.name.capitalize()} not found or no changes made",
            )

        logger.info("Updated %s %s: %s", self.name, document_id, sorted(fields))
        return StatusResponse(message=f"{self.name.capitalize()} updated successfully")

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete(self, store: DocumentStore, document_id: str) -> StatusResponse:
        """
        Remove the single document with the given id.

        Raises:
            ValidationError: Malformed id, checked before any storage call (→ 400)
            NotFoundError: No document matched (→ 404)
            DatabaseError: Storage call failed (→ 500)
        """
        self._check_id(store, document_id)
        try:
            deleted = await store.delete_one(self.collection, document_id)
        except Exception as e:
            raise self._storage_failure("delete", e, document_id)

        if deleted == 0:
            raise NotFoundError(resource=self.name, resource_id=document_id)

        logger.info("Deleted %s %s", self.name, document_id)
        return StatusResponse(message=f"{self.name.capitalize()} deleted successfully")

    # ── Helpers ───────────────────────────────────────────────────────────

    def _check_id(self, store: DocumentStore, document_id: str) -> None:
        if not store.is_valid_id(document_id):
            raise ValidationError(
                message="Invalid id",
                field="id",
                context={"resource": self.name},
            )

    def _storage_failure(
        self, operation: str, error: Exception, document_id: Optional[str] = None
    ) -> DatabaseError:
        logger.error(
            "Storage error during %s of %s %s: %s",
            operation,
            self.name,
            document_id or "",
            str(error),
            exc_info=True,
        )
        context = {
            "operation": operation,
            "collection": self.collection,
            "error_type": type(error).__name__,
        }
        if document_id:
            context["document_id"] = document_id
        return DatabaseError(context=context)


# ── Per-resource instances ────────────────────────────────────────────────
project_service = ResourceService(
    collection=settings.projects_collection,
    name="project",
    plural="projects",
    document_model=ProjectDocument,
)

blog_service = ResourceService(
    collection=settings.blogs_collection,
    name="blog post",
    plural="blog posts",
    document_model=BlogDocument,
)

message_service = ResourceService(
    collection=settings.messages_collection,
    name="message",
    plural="messages",
    document_model=MessageDocument,
)
