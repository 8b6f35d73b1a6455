"""
Blog API Backend: Like Service
===============================

What:  Like counts and per-user like toggling on the `likes` table.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import AsyncClient

from blog_api.exceptions import ValidationError
from blog_api.schemas.engagement import LikeCreate, LikeSummary
from blog_api.services.query_helpers import first_row
from blog_api.supabase_client import execute

logger = logging.getLogger(__name__)


class LikeService:

    TABLE = "likes"

    async def get_summary(
        self,
        client: AsyncClient,
        post_id: str,
        user_id: Optional[str] = None,
    ) -> LikeSummary:
        """
        Total likes on a post and, when `user_id` is given, whether that
        user is among them.
        """
        counted = await execute(
            client.table(self.TABLE)
            .select("id", count="exact")
            .eq("post_id", post_id)
        )
        count = counted.count if counted.count is not None else len(counted.data or [])

        user_liked = False
        if user_id:
            own = await execute(
                client.table(self.TABLE)
                .select("id")
                .eq("post_id", post_id)
                .eq("user_id", user_id)
                .limit(1)
            )
            user_liked = bool(own.data)

        return LikeSummary(count=count, user_liked=user_liked)

    async def add_like(self, client: AsyncClient, post_id: str, payload: LikeCreate) -> Dict[str, Any]:
        if not payload.user_id:
            raise ValidationError(message="Post ID and User ID are required", field="user_id")

        row = {
            "post_id": post_id,
            "user_id": payload.user_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        result = await execute(client.table(self.TABLE).insert(row))
        logger.info("Post %s liked by user %s", post_id, payload.user_id)
        return first_row(result.data, resource="Like")

    async def remove_like(self, client: AsyncClient, post_id: str, user_id: Optional[str]) -> Dict[str, Any]:
        if not user_id:
            raise ValidationError(message="Post ID and User ID are required", field="user_id")

        await execute(
            client.table(self.TABLE)
            .delete()
            .eq("post_id", post_id)
            .eq("user_id", user_id)
        )
        return {"post_id": post_id, "user_id": user_id}


like_service = LikeService()
