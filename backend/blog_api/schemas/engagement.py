"""
Blog API Backend: Comment, Like, User and Notification Schemas
===============================================================

What:  Request bodies for the reader-engagement routes and profile edits.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    # Optional here; the service answers a missing value with a 400 envelope
    content: Optional[str] = None
    user_id: Optional[str] = None


class LikeCreate(BaseModel):
    user_id: Optional[str] = None


class LikeSummary(BaseModel):
    count: int = Field(description="Total likes on the post")
    user_liked: bool = Field(description="Whether the requesting user liked the post")


class UserUpdate(BaseModel):
    """Body of PUT /api/users/{id}. Empty strings count as "not sent"."""

    name: Optional[str] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class NotificationUpdate(BaseModel):
    is_read: bool = True
