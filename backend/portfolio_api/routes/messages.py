"""
Portfolio API — Contact Message Route Handlers
===============================================

What:  POST /api/message (contact form submission) and GET /api/message.
Why:   Messages are write-once from the public site and read by the owner;
       update and delete are intentionally not exposed.
"""

from fastapi import APIRouter, Depends, status

from portfolio_api.database import get_document_store
from portfolio_api.schemas.common import CreatedResponse, ErrorResponse, ListResponse
from portfolio_api.schemas.message import MessageCreate, MessageDocument
from portfolio_api.services.resource_service import message_service
from portfolio_api.services.store_base import DocumentStore

router = APIRouter(prefix="/api", tags=["Messages"])


@router.post(
    "/message",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Invalid body or write not acknowledged", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Submit a contact message",
)
async def create_message(
    payload: MessageCreate,
    store: DocumentStore = Depends(get_document_store),
) -> CreatedResponse:
    return await message_service.create(store, payload.model_dump(exclude_unset=True))


@router.get(
    "/message",
    response_model=ListResponse[MessageDocument],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all contact messages",
)
async def list_messages(
    store: DocumentStore = Depends(get_document_store),
) -> ListResponse[MessageDocument]:
    return await message_service.list_all(store)
