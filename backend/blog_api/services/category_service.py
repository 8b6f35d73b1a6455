"""
Blog API Backend: Category Service
===================================

What:  Read-only access to the `categories` table.
How:   One query: fixed projection (id, name), ordered by name ascending.
       No pagination, filtering or writes.
"""

import logging
from typing import Any, Dict, List

from supabase import AsyncClient

from blog_api.supabase_client import execute

logger = logging.getLogger(__name__)


class CategoryService:

    TABLE = "categories"
    COLUMNS = "id, name"

    async def list_categories(self, client: AsyncClient) -> List[Dict[str, Any]]:
        """
        Return every category, sorted by name.

        An empty table yields an empty list, never None.

        Raises:
            BackendQueryError: the backend rejected the query
        """
        result = await execute(
            client.table(self.TABLE)
            .select(self.COLUMNS)
            .order("name")
        )
        rows = result.data or []
        logger.debug("Fetched %d categories", len(rows))
        return rows


category_service = CategoryService()
