"""
Portfolio API — Project Route Handlers
=======================================

What:  POST/GET /api/projects, PATCH/DELETE /api/projects/{project_id}.
How:   Extracts the body or path id, delegates to project_service, returns
       the envelope. Status codes for failures come from the global
       exception handlers.
Who:   Called by the portfolio frontend and its admin dashboard.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from portfolio_api.database import get_document_store
from portfolio_api.schemas.common import (
    CreatedResponse,
    ErrorResponse,
    ListResponse,
    StatusResponse,
)
from portfolio_api.schemas.project import ProjectCreate, ProjectDocument, ProjectUpdate
from portfolio_api.services.resource_service import project_service
from portfolio_api.services.store_base import DocumentStore

router = APIRouter(prefix="/api", tags=["Projects"])


@router.post(
    "/projects",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Invalid body or write not acknowledged", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a project",
)
async def create_project(
    payload: ProjectCreate,
    store: DocumentStore = Depends(get_document_store),
) -> CreatedResponse:
    return await project_service.create(store, payload.model_dump(exclude_unset=True))


@router.get(
    "/projects",
    response_model=ListResponse[ProjectDocument],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all projects",
)
async def list_projects(
    store: DocumentStore = Depends(get_document_store),
) -> ListResponse[ProjectDocument]:
    return await project_service.list_all(store)


@router.patch(
    "/projects/{project_id}",
    response_model=StatusResponse,
    responses={
        400: {"description": "Invalid id or empty update", "model": ErrorResponse},
        404: {"description": "Project not found or no changes made", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update fields of a project",
    description=(
        "Merges the supplied fields onto the project and refreshes its createdAt. "
        "Fields not present in the body keep their stored values."
    ),
)
async def update_project(
    project_id: str,
    payload: Optional[ProjectUpdate] = Body(default=None),
    store: DocumentStore = Depends(get_document_store),
) -> StatusResponse:
    fields = payload.model_dump(exclude_unset=True) if payload is not None else None
    return await project_service.update(store, project_id, fields)


@router.delete(
    "/projects/{project_id}",
    response_model=StatusResponse,
    responses={
        400: {"description": "Invalid id", "model": ErrorResponse},
        404: {"description": "Project not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a project",
)
async def delete_project(
    project_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> StatusResponse:
    return await project_service.delete(store, project_id)
