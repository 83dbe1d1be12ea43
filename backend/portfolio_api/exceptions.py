"""
Portfolio API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the failure modes of a CRUD request.
Why:   Services raise typed errors; global handlers (registered in main.py)
       turn them into the JSON error envelope with the right status code.
How:   Each exception carries a user-facing message and an optional context
       dict. Context is logged server-side and never returned to the client
       unless the handler explicitly exposes it as `details`.

Exception Hierarchy:
    PortfolioError (base)
    ├── ValidationError            → 400 Bad Request (client can fix)
    ├── WriteNotAcknowledgedError  → 400 Bad Request (storage refused the write)
    ├── NotFoundError              → 404 Not Found
    └── DatabaseError              → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class PortfolioError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PortfolioError):
    """
    Raised when client input fails validation before any storage call.

    When:    Malformed document id, update request with no fields, request
             body rejected by the resource schema.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class WriteNotAcknowledgedError(PortfolioError):
    """
    Raised when the storage layer did not acknowledge an insert.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        resource: str = "resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(message=f"Failed to create {resource}", context=ctx)
        self.resource = resource


class NotFoundError(PortfolioError):
    """
    Raised when an update or delete matched no document.

    Update also raises it when the matched document ended up unmodified, so
    the default message can be replaced by the caller.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PortfolioError):
    """
    Raised when a storage operation fails unexpectedly.

    When:    Connection lost, server selection timeout, write error, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The driver
        error is logged server-side only.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
