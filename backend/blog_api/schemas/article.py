"""
Blog API Backend: Article Schemas
==================================

What:  Request bodies for article writes and the article status enum.
Why:   Rows read from the backend are passed through as-is (the backend
       owns the column set), but anything we write is validated here first.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class ArticleStatus(str, Enum):
    """Publication state of an article."""

    DRAFT = "Draft"
    PUBLISHED = "Published"


class ArticleCreate(BaseModel):
    """
    Body of POST /api/posts.

    `user_id` is optional at the schema level so the service can answer a
    missing author with 401 "User ID required" instead of a field error.
    """

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(default="")
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, description="Cover image URL")
    category_id: Optional[Union[int, str]] = None
    status: ArticleStatus = ArticleStatus.DRAFT
    user_id: Optional[str] = None


class ArticleUpdate(BaseModel):
    """Body of PUT /api/posts/{id}. Only the fields actually sent are written."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[Union[int, str]] = None
    status: Optional[ArticleStatus] = None

    @field_validator("title", "content", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        # Omit a field to leave it unchanged; these columns are never NULL
        if v is None:
            raise ValueError("may not be null")
        return v
