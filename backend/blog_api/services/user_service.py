"""
Blog API Backend: User Service
===============================

What:  Public user profiles (`users`) and their notifications
       (`notifications`).

Profile updates only touch the fields that were sent with a non-empty
value, so a form that submits blank inputs cannot wipe a profile.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import AsyncClient

from blog_api.exceptions import UnauthorizedError, ValidationError
from blog_api.schemas.engagement import NotificationUpdate, UserUpdate
from blog_api.services.query_helpers import fetch_single, first_row, project
from blog_api.supabase_client import execute

logger = logging.getLogger(__name__)


class UserService:

    USERS = "users"
    NOTIFICATIONS = "notifications"

    PROFILE_COLUMNS = "id, name, username, bio, avatar_url, email, created_at"
    PROFILE_FIELDS = [c.strip() for c in PROFILE_COLUMNS.split(",")]
    NOTIFICATION_COLUMNS = "*, comment:comment_id(content), article:article_id(title)"

    async def get_user(self, client: AsyncClient, user_id: str) -> Dict[str, Any]:
        """
        Raises:
            NotFoundError: no user has this id
        """
        return await fetch_single(
            client.table(self.USERS).select(self.PROFILE_COLUMNS).eq("id", user_id),
            resource="User",
            resource_id=user_id,
        )

    async def update_user(self, client: AsyncClient, user_id: str, payload: UserUpdate) -> Dict[str, Any]:
        values = {k: v for k, v in payload.model_dump().items() if v}
        if not values:
            raise ValidationError(message="No fields to update")

        result = await execute(
            client.table(self.USERS)
            .update(values)
            .eq("id", user_id)
        )
        logger.info("Profile %s updated: %s", user_id, sorted(values))
        user = first_row(result.data, resource="User", resource_id=user_id)
        return project(user, self.PROFILE_FIELDS)

    async def list_notifications(self, client: AsyncClient, user_id: Optional[str]) -> List[Dict[str, Any]]:
        """
        Raises:
            UnauthorizedError: no user_id was given
        """
        if not user_id:
            raise UnauthorizedError()

        result = await execute(
            client.table(self.NOTIFICATIONS)
            .select(self.NOTIFICATION_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        return result.data or []

    async def update_notification(
        self,
        client: AsyncClient,
        notification_id: str,
        payload: NotificationUpdate,
    ) -> Dict[str, Any]:
        result = await execute(
            client.table(self.NOTIFICATIONS)
            .update(payload.model_dump())
            .eq("id", notification_id)
        )
        return first_row(result.data, resource="Notification", resource_id=notification_id)


user_service = UserService()
