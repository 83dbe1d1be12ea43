"""
Portfolio API — Shared Envelope Schemas
========================================

What:  The JSON envelopes every endpoint returns, plus the stored-document base.
Why:   One envelope shape across projects, blog posts and messages: every
       success body carries `success` and `message`; every error body carries
       `success: false`, a machine-readable `error` code and the request id.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class StoredDocument(BaseModel):
    """
    Fields the storage layer adds to every document.

    `_id` and `createdAt` keep the names the documents carry in MongoDB, so
    the serialized form matches what the frontend already consumes. Fields
    outside the declared ones are passed through unchanged.
    """
    id: str = Field(alias="_id", description="Storage-assigned identifier")
    created_at: Optional[datetime] = Field(
        default=None,
        alias="createdAt",
        description="Set on creation, refreshed on every update (UTC)",
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")


DocumentT = TypeVar("DocumentT", bound=StoredDocument)


class CreatedResponse(BaseModel):
    """Returned with HTTP 201 after a successful insert."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable success message")
    id: str = Field(description="Identifier of the new document")


class ListResponse(BaseModel, Generic[DocumentT]):
    """Every document of one collection, unpaginated."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable success message")
    data: List[DocumentT] = Field(default_factory=list)


class StatusResponse(BaseModel):
    """Returned by update and delete on success."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable success message")


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "success": false,
            "error": "validation_error",
            "message": "Invalid id",
            "details": {"field": "id"},
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Service and database status for monitoring probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
