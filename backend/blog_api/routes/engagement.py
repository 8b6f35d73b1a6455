"""
Blog API Backend: Comment and Like Route Handlers
==================================================

Route Inventory:
    GET    /api/posts/{post_id}/comments               newest first
    POST   /api/posts/{post_id}/comments               {content, user_id}
    DELETE /api/posts/{post_id}/comments/{comment_id}
    GET    /api/posts/{post_id}/likes?user_id=         {count, user_liked}
    POST   /api/posts/{post_id}/likes                  {user_id}
    DELETE /api/posts/{post_id}/likes?user_id=
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from supabase import AsyncClient

from blog_api.database import require_backend_client
from blog_api.schemas.engagement import CommentCreate, LikeCreate, LikeSummary
from blog_api.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from blog_api.services.comment_service import comment_service
from blog_api.services.like_service import like_service

router = APIRouter(prefix="/api/posts/{post_id}", tags=["Comments & Likes"])

Row = Dict[str, Any]


# ── Comments ──────────────────────────────────────────────────────────────

@router.get("/comments", response_model=SuccessEnvelope[List[Row]])
async def list_comments(
    post_id: str,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[List[Row]]:
    rows = await comment_service.list_comments(client, post_id)
    return SuccessEnvelope[List[Row]](data=rows)


@router.post(
    "/comments",
    status_code=201,
    response_model=SuccessEnvelope[Row],
    responses={400: {"description": "Missing content or user_id", "model": ErrorEnvelope}},
)
async def create_comment(
    post_id: str,
    payload: CommentCreate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    comment = await comment_service.create_comment(client, post_id, payload)
    return SuccessEnvelope[Row](data=comment)


@router.delete("/comments/{comment_id}", response_model=SuccessEnvelope[Row])
async def delete_comment(
    post_id: str,
    comment_id: str,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    deleted = await comment_service.delete_comment(client, comment_id)
    return SuccessEnvelope[Row](data=deleted)


# ── Likes ─────────────────────────────────────────────────────────────────

@router.get("/likes", response_model=SuccessEnvelope[LikeSummary])
async def get_likes(
    post_id: str,
    user_id: Optional[str] = Query(default=None, description="Report whether this user liked the post"),
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[LikeSummary]:
    summary = await like_service.get_summary(client, post_id, user_id=user_id)
    return SuccessEnvelope[LikeSummary](data=summary)


@router.post(
    "/likes",
    status_code=201,
    response_model=SuccessEnvelope[Row],
    responses={400: {"description": "Missing user_id", "model": ErrorEnvelope}},
)
async def add_like(
    post_id: str,
    payload: LikeCreate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    like = await like_service.add_like(client, post_id, payload)
    return SuccessEnvelope[Row](data=like)


@router.delete(
    "/likes",
    response_model=SuccessEnvelope[Row],
    responses={400: {"description": "Missing user_id", "model": ErrorEnvelope}},
)
async def remove_like(
    post_id: str,
    user_id: Optional[str] = Query(default=None),
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    removed = await like_service.remove_like(client, post_id, user_id)
    return SuccessEnvelope[Row](data=removed)
