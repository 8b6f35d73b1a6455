"""
Blog API Backend: Development Route
====================================

What:  POST /api/dev/publish-drafts, a helper for seeding a local blog.
       Refused with 403 when APP_ENV=production.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from supabase import AsyncClient

from blog_api.database import require_backend_client
from blog_api.schemas.envelope import ErrorEnvelope, MessageEnvelope
from blog_api.services.article_service import article_service

router = APIRouter(prefix="/api/dev", tags=["Development"])


@router.post(
    "/publish-drafts",
    response_model=MessageEnvelope[List[Dict[str, Any]]],
    responses={403: {"description": "Disabled in production", "model": ErrorEnvelope}},
    summary="Publish every draft article",
)
async def publish_drafts(
    client: AsyncClient = Depends(require_backend_client),
) -> MessageEnvelope[List[Dict[str, Any]]]:
    rows = await article_service.publish_drafts(client)
    return MessageEnvelope[List[Dict[str, Any]]](
        data=rows,
        message=f"Published {len(rows)} articles",
    )
