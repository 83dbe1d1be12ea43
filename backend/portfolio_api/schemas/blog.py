"""
Portfolio API — Blog Post Schemas
==================================

What:  Request and response models for the `blogs` collection.
Who:   Used by routes/blog.py.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from portfolio_api.schemas.common import StoredDocument

BlogCategory = Literal["Technology", "Lifestyle", "Health", "Education", "Business"]


class BlogFields(BaseModel):
    title: Optional[str] = Field(default=None)
    content: Optional[str] = Field(default=None, description="Post body")
    image: Optional[str] = Field(default=None, description="Cover image URL")
    category: Optional[BlogCategory] = Field(default=None)


class BlogCreate(BlogFields):
    """Body of POST /api/blog."""


class BlogUpdate(BlogFields):
    """Body of PATCH /api/blog/{id}; only the fields sent are applied."""


class BlogDocument(StoredDocument):
    """A stored blog post as returned by GET /api/blog, values as stored."""
    title: Any = None
    content: Any = None
    image: Any = None
    category: Any = None
