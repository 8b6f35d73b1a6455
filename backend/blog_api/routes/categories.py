"""
Blog API Backend: Category Route Handlers
==========================================

What:  GET /api/categories, the list the front end uses for its category
       tabs and the article form's category picker.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from supabase import AsyncClient

from blog_api.database import require_backend_client
from blog_api.schemas.category import CategoryOut
from blog_api.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from blog_api.services.category_service import category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get(
    "/categories",
    response_model=SuccessEnvelope[List[CategoryOut]],
    responses={
        405: {"description": "Method not allowed", "model": ErrorEnvelope},
        500: {"description": "Configuration or backend error", "model": ErrorEnvelope},
    },
    summary="List all categories",
)
async def list_categories(
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[List[CategoryOut]]:
    """
    All categories as `{id, name}`, sorted by name.

    Error responses (handled by global exception handlers):
        HTTP 500: credentials missing (ConfigurationError)
        HTTP 500: backend query failed (BackendQueryError)
    """
    rows = await category_service.list_categories(client)
    return SuccessEnvelope[List[CategoryOut]](data=rows)
