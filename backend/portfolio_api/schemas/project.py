"""
Portfolio API — Project Schemas
================================

What:  Request and response models for the `projects` collection.
Who:   Used by routes/projects.py.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from portfolio_api.schemas.common import StoredDocument

ProjectCategory = Literal["Frontend", "Backend", "Full Stack"]


class ProjectFields(BaseModel):
    """Client-editable project fields. None of them is required."""
    title: Optional[str] = Field(default=None)
    image: Optional[str] = Field(default=None, description="Preview image URL")
    live: Optional[str] = Field(default=None, description="Live deployment URL")
    code: Optional[str] = Field(default=None, description="Source repository URL")
    description: Optional[str] = Field(default=None)
    category: Optional[ProjectCategory] = Field(default=None)


class ProjectCreate(ProjectFields):
    """Body of POST /api/projects."""


class ProjectUpdate(ProjectFields):
    """Body of PATCH /api/projects/{id}; only the fields sent are applied."""


class ProjectDocument(StoredDocument):
    """
    A stored project as returned by GET /api/projects.

    Values are returned as stored. Documents written by other tools may hold
    a category outside ProjectCategory or non-string fields.
    """
    title: Any = None
    image: Any = None
    live: Any = None
    code: Any = None
    description: Any = None
    category: Any = None
