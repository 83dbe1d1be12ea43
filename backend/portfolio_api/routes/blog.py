"""
Portfolio API — Blog Route Handlers
====================================

What:  POST/GET /api/blog, PATCH/DELETE /api/blog/{blog_id}.
How:   Same shape as the project routes, backed by blog_service.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from portfolio_api.database import get_document_store
from portfolio_api.schemas.blog import BlogCreate, BlogDocument, BlogUpdate
from portfolio_api.schemas.common import (
    CreatedResponse,
    ErrorResponse,
    ListResponse,
    StatusResponse,
)
from portfolio_api.services.resource_service import blog_service
from portfolio_api.services.store_base import DocumentStore

router = APIRouter(prefix="/api", tags=["Blog"])


@router.post(
    "/blog",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Invalid body or write not acknowledged", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a blog post",
)
async def create_blog_post(
    payload: BlogCreate,
    store: DocumentStore = Depends(get_document_store),
) -> CreatedResponse:
    return await blog_service.create(store, payload.model_dump(exclude_unset=True))


@router.get(
    "/blog",
    response_model=ListResponse[BlogDocument],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all blog posts",
)
async def list_blog_posts(
    store: DocumentStore = Depends(get_document_store),
) -> ListResponse[BlogDocument]:
    return await blog_service.list_all(store)


@router.patch(
    "/blog/{blog_id}",
    response_model=StatusResponse,
    responses={
        400: {"description": "Invalid id or empty update", "model": ErrorResponse},
        404: {"description": "Blog post not found or no changes made", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update fields of a blog post",
)
async def update_blog_post(
    blog_id: str,
    payload: Optional[BlogUpdate] = Body(default=None),
    store: DocumentStore = Depends(get_document_store),
) -> StatusResponse:
    fields = payload.model_dump(exclude_unset=True) if payload is not None else None
    return await blog_service.update(store, blog_id, fields)


@router.delete(
    "/blog/{blog_id}",
    response_model=StatusResponse,
    responses={
        400: {"description": "Invalid id", "model": ErrorResponse},
        404: {"description": "Blog post not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a blog post",
)
async def delete_blog_post(
    blog_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> StatusResponse:
    return await blog_service.delete(store, blog_id)
