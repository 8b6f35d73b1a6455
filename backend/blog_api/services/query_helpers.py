"""Small translations shared by the services."""

from typing import Any, Dict, Iterable, List, Optional

from blog_api.exceptions import BackendQueryError, NotFoundError
from blog_api.supabase_client import NO_ROWS_CODE, execute


async def fetch_single(query: Any, resource: str, resource_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Execute a single-row read, mapping PostgREST's "no rows" error to a 404.

    Any other backend failure propagates unchanged.
    """
    try:
        result = await execute(query.single())
    except BackendQueryError as e:
        if e.code == NO_ROWS_CODE:
            raise NotFoundError(resource=resource, resource_id=resource_id) from e
        raise
    return result.data


def first_row(rows: Optional[List[Dict[str, Any]]], resource: str, resource_id: Optional[str] = None) -> Dict[str, Any]:
    """First row of a write's representation; an empty result means the filter matched nothing."""
    if not rows:
        raise NotFoundError(resource=resource, resource_id=resource_id)
    return rows[0]


def project(row: Dict[str, Any], columns: Iterable[str]) -> Dict[str, Any]:
    # Write representations come back with every column
    return {column: row.get(column) for column in columns}
