"""
Blog API Backend: Post (Article) Route Handlers
================================================

What:  Public listing/detail of published articles and the admin writes.

Route Inventory:
    GET    /api/posts              paginated Published articles
    POST   /api/posts              create (Draft by default)
    GET    /api/posts/{id}         one Published article
    PUT    /api/posts/{id}         partial update, e.g. Draft → Published
    DELETE /api/posts/{id}         remove
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from supabase import AsyncClient

from blog_api.database import require_backend_client
from blog_api.schemas.article import ArticleCreate, ArticleUpdate
from blog_api.schemas.envelope import ErrorEnvelope, PaginatedEnvelope, SuccessEnvelope
from blog_api.services.article_service import article_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Posts"])

Row = Dict[str, Any]


@router.get(
    "/posts",
    response_model=PaginatedEnvelope[Row],
    responses={500: {"description": "Backend error", "model": ErrorEnvelope}},
    summary="List published posts",
)
async def list_posts(
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int = Query(default=10, ge=1, le=100, description="Posts per page (max 100)"),
    category: Optional[str] = Query(default=None, description="Only posts in this category id"),
    client: AsyncClient = Depends(require_backend_client),
) -> PaginatedEnvelope[Row]:
    rows, pagination = await article_service.list_published(
        client, page=page, limit=limit, category=category
    )
    return PaginatedEnvelope[Row](data=rows, pagination=pagination)


@router.post(
    "/posts",
    status_code=201,
    response_model=SuccessEnvelope[Row],
    responses={
        400: {"description": "Invalid body", "model": ErrorEnvelope},
        401: {"description": "No user_id given", "model": ErrorEnvelope},
    },
    summary="Create a post",
)
async def create_post(
    payload: ArticleCreate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    article = await article_service.create_article(client, payload)
    return SuccessEnvelope[Row](data=article)


@router.get(
    "/posts/{article_id}",
    response_model=SuccessEnvelope[Row],
    responses={404: {"description": "Post not found", "model": ErrorEnvelope}},
    summary="Get one published post",
)
async def get_post(
    article_id: str,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    """Also increments the post's view counter."""
    article = await article_service.get_published(client, article_id)
    return SuccessEnvelope[Row](data=article)


@router.put(
    "/posts/{article_id}",
    response_model=SuccessEnvelope[Row],
    responses={
        400: {"description": "Nothing to update", "model": ErrorEnvelope},
        404: {"description": "Post not found", "model": ErrorEnvelope},
    },
    summary="Update a post",
)
async def update_post(
    article_id: str,
    payload: ArticleUpdate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    article = await article_service.update_article(client, article_id, payload)
    return SuccessEnvelope[Row](data=article)


@router.delete(
    "/posts/{article_id}",
    response_model=SuccessEnvelope[Row],
    summary="Delete a post",
)
async def delete_post(
    article_id: str,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    deleted = await article_service.delete_article(client, article_id)
    return SuccessEnvelope[Row](data=deleted)
