"""
Portfolio API — Contact Message Schemas
========================================

Messages are write-once: there is no update model.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from portfolio_api.schemas.common import StoredDocument


class MessageCreate(BaseModel):
    """Body of POST /api/message."""
    text: Optional[str] = Field(default=None, description="Message text from the contact form")


class MessageDocument(StoredDocument):
    text: Any = None
