"""
Blog API Backend: Article Service
==================================

What:  Queries against the `articles` table for the posts routes.
Who:   Called by routes/posts.py and routes/dev.py.

Visibility rules:
    - Public reads (list, detail) only ever return Published articles.
    - Writes address articles by id regardless of status; this is how an
      article moves from Draft to Published.

Article lifecycle:
    POST /api/posts           → row created, status defaults to Draft
    PUT  /api/posts/{id}      → any field, including status, updated
    GET  /api/posts/{id}      → visible once Published; bumps views_count
    DELETE /api/posts/{id}    → row removed
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from supabase import AsyncClient

from blog_api.config import settings
from blog_api.exceptions import (
    BackendQueryError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from blog_api.schemas.article import ArticleCreate, ArticleStatus, ArticleUpdate
from blog_api.schemas.envelope import Pagination
from blog_api.services.query_helpers import fetch_single, first_row
from blog_api.supabase_client import RANGE_NOT_SATISFIABLE_CODE, execute

logger = logging.getLogger(__name__)


class ArticleService:
    """
    Responsibilities:
        - list_published(): paginated, newest-first listing of Published posts
        - get_published(): one Published post, with a best-effort view bump
        - create_article() / update_article() / delete_article()
        - publish_drafts(): development helper flipping every Draft to Published
    """

    TABLE = "articles"

    # Embedded relations resolved by PostgREST through the foreign keys
    LIST_COLUMNS = "*, category:category_id(name), author:user_id(name, avatar_url)"
    DETAIL_COLUMNS = "*, category:category_id(name), author:user_id(name, avatar_url, email)"

    def _published(self, client: AsyncClient, columns: str, category: Optional[str]):
        query = client.table(self.TABLE).select(columns, count="exact")
        if category:
            query = query.eq("category_id", category)
        return query.eq("status", ArticleStatus.PUBLISHED.value)

    async def list_published(
        self,
        client: AsyncClient,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Pagination]:
        """
        Return one page of Published articles plus pagination metadata.

        Args:
            page:     1-based page number
            limit:    page size
            category: optional category id filter

        A page past the last one is empty, with the real total.
        """
        start = (page - 1) * limit
        try:
            result = await execute(
                self._published(client, self.LIST_COLUMNS, category)
                .order("created_at", desc=True)
                .range(start, start + limit - 1)
            )
            rows = result.data or []
            count = result.count
        except BackendQueryError as e:
            if e.code != RANGE_NOT_SATISFIABLE_CODE:
                raise
            counted = await execute(self._published(client, "id", category).limit(1))
            rows, count = [], counted.count

        total = count if count is not None else len(rows)
        pagination = Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if total else 0,
        )
        return rows, pagination

    async def get_published(self, client: AsyncClient, article_id: str) -> Dict[str, Any]:
        """
        Return one Published article and increment its view counter.

        Raises:
            NotFoundError: no Published article has this id
            BackendQueryError: the read itself failed
        """
        article = await fetch_single(
            client.table(self.TABLE)
            .select(self.DETAIL_COLUMNS)
            .eq("id", article_id)
            .eq("status", ArticleStatus.PUBLISHED.value),
            resource="Post",
            resource_id=article_id,
        )
        await self._increment_views(client, article)
        return article

    async def _increment_views(self, client: AsyncClient, article: Dict[str, Any]) -> None:
        # Best effort: a failed counter update never fails the read
        views = (article.get("views_count") or 0) + 1
        try:
            await execute(
                client.table(self.TABLE)
                .update({"views_count": views})
                .eq("id", article["id"])
            )
        except BackendQueryError as e:
            logger.warning("Could not update views_count for article %s: %s", article.get("id"), e.message)
            return
        article["views_count"] = views

    async def create_article(self, client: AsyncClient, payload: ArticleCreate) -> Dict[str, Any]:
        """
        Insert a new article. Status defaults to Draft.

        Raises:
            UnauthorizedError: no user_id in the body
        """
        if not payload.user_id:
            raise UnauthorizedError()

        row = payload.model_dump(mode="json", exclude_none=True)
        result = await execute(client.table(self.TABLE).insert(row))
        logger.info("Article created by user %s (status=%s)", payload.user_id, row["status"])
        return first_row(result.data, resource="Post")

    async def update_article(
        self,
        client: AsyncClient,
        article_id: str,
        payload: ArticleUpdate,
    ) -> Dict[str, Any]:
        """
        Write only the fields present in the request body.

        Raises:
            ValidationError: the body contained no fields
            NotFoundError: no article has this id
        """
        values = payload.model_dump(mode="json", exclude_unset=True)
        if not values:
            raise ValidationError(message="No fields to update")

        result = await execute(client.table(self.TABLE).update(values).eq("id", article_id))
        article = first_row(result.data, resource="Post", resource_id=article_id)
        if "status" in values:
            logger.info("Article %s status set to %s", article_id, values["status"])
        return article

    async def delete_article(self, client: AsyncClient, article_id: str) -> Dict[str, Any]:
        await execute(client.table(self.TABLE).delete().eq("id", article_id))
        logger.info("Article %s deleted", article_id)
        return {"id": article_id}

    async def publish_drafts(self, client: AsyncClient) -> List[Dict[str, Any]]:
        """
        Flip every Draft article to Published. Development only.

        Raises:
            ForbiddenError: APP_ENV is production
        """
        if settings.is_production:
            raise ForbiddenError(message="Not allowed in production")

        result = await execute(
            client.table(self.TABLE)
            .update({"status": ArticleStatus.PUBLISHED.value})
            .eq("status", ArticleStatus.DRAFT.value)
        )
        rows = result.data or []
        logger.info("Published %d draft articles", len(rows))
        return rows


article_service = ArticleService()
