"""
Blog API Backend: Comment Service
==================================

What:  Reads and writes rows of the `comments` table for one post.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from supabase import AsyncClient

from blog_api.exceptions import ValidationError
from blog_api.schemas.engagement import CommentCreate
from blog_api.services.query_helpers import first_row
from blog_api.supabase_client import execute

logger = logging.getLogger(__name__)


class CommentService:

    TABLE = "comments"
    COLUMNS = "*, author:user_id(id, name, avatar_url)"

    async def list_comments(self, client: AsyncClient, post_id: str) -> List[Dict[str, Any]]:
        """Comments on a post, newest first. Empty list when there are none."""
        result = await execute(
            client.table(self.TABLE)
            .select(self.COLUMNS)
            .eq("post_id", post_id)
            .order("created_at", desc=True)
        )
        return result.data or []

    async def create_comment(
        self,
        client: AsyncClient,
        post_id: str,
        payload: CommentCreate,
    ) -> Dict[str, Any]:
        """
        Raises:
            ValidationError: content or user_id is missing or blank
        """
        content = (payload.content or "").strip()
        if not content or not payload.user_id:
            raise ValidationError(message="Content and user_id are required")

        row = {
            "post_id": post_id,
            "user_id": payload.user_id,
            "content": content,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        result = await execute(client.table(self.TABLE).insert(row))
        logger.info("Comment added to post %s by user %s", post_id, payload.user_id)
        return first_row(result.data, resource="Comment")

    async def delete_comment(self, client: AsyncClient, comment_id: str) -> Dict[str, Any]:
        await execute(client.table(self.TABLE).delete().eq("id", comment_id))
        return {"id": comment_id}


comment_service = CommentService()
