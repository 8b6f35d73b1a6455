"""
Blog API Backend: User and Notification Route Handlers
=======================================================

Route Inventory:
    GET /api/users/{user_id}                      public profile
    PUT /api/users/{user_id}                      edit name/username/bio/avatar
    GET /api/notifications?user_id=               newest first
    PUT /api/notifications/{notification_id}      mark read / unread
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from supabase import AsyncClient

from blog_api.database import require_backend_client
from blog_api.schemas.engagement import NotificationUpdate, UserUpdate
from blog_api.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from blog_api.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Users"])

Row = Dict[str, Any]


@router.get(
    "/users/{user_id}",
    response_model=SuccessEnvelope[Row],
    responses={404: {"description": "User not found", "model": ErrorEnvelope}},
)
async def get_user(
    user_id: str,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    user = await user_service.get_user(client, user_id)
    return SuccessEnvelope[Row](data=user)


@router.put(
    "/users/{user_id}",
    response_model=SuccessEnvelope[Row],
    responses={
        400: {"description": "Nothing to update", "model": ErrorEnvelope},
        404: {"description": "User not found", "model": ErrorEnvelope},
    },
)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    user = await user_service.update_user(client, user_id, payload)
    return SuccessEnvelope[Row](data=user)


@router.get(
    "/notifications",
    response_model=SuccessEnvelope[List[Row]],
    responses={401: {"description": "No user_id given", "model": ErrorEnvelope}},
)
async def list_notifications(
    user_id: Optional[str] = Query(default=None),
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[List[Row]]:
    rows = await user_service.list_notifications(client, user_id)
    return SuccessEnvelope[List[Row]](data=rows)


@router.put(
    "/notifications/{notification_id}",
    response_model=SuccessEnvelope[Row],
    responses={404: {"description": "Notification not found", "model": ErrorEnvelope}},
)
async def update_notification(
    notification_id: str,
    payload: NotificationUpdate,
    client: AsyncClient = Depends(require_backend_client),
) -> SuccessEnvelope[Row]:
    notification = await user_service.update_notification(client, notification_id, payload)
    return SuccessEnvelope[Row](data=notification)
