"""
Blog API Backend: Supabase Client Adapter
==========================================

What:  The seam between the services and supabase-py.
How:   Services build queries on the library's async client
       (`client.table(...).select(...).eq(...)`) and run them through
       `execute()`, which turns library and transport failures into
       BackendQueryError. No retries: one request, one outcome.
Who:   `database.create_backend_client()` hands out either a supabase
       AsyncClient or the DisabledBackendClient sentinel.

PostgREST codes the services care about:
    PGRST116  single-row read matched no rows      → 404
    PGRST103  offset past the end of a counted set → empty page
"""

import logging
from typing import Any, Union

import httpx
from postgrest import APIResponse
from postgrest.exceptions import APIError
from supabase import AsyncClient

from blog_api.exceptions import BackendQueryError, ConfigurationError

logger = logging.getLogger(__name__)

NO_ROWS_CODE = "PGRST116"
RANGE_NOT_SATISFIABLE_CODE = "PGRST103"


async def execute(query: Any) -> APIResponse:
    """
    Run a built query and return the library's APIResponse (`data`, `count`).

    Raises:
        BackendQueryError: PostgREST rejected the query or the backend
            could not be reached. Carries the backend's message and code.
    """
    try:
        return await query.execute()
    except APIError as e:
        code = str(e.code) if e.code is not None else None
        raise BackendQueryError(
            message=e.message or "Backend query failed",
            code=code,
            context={"details": e.details, "hint": e.hint},
        ) from e
    except httpx.HTTPError as e:
        logger.error("Supabase request failed: %s", str(e))
        raise BackendQueryError(
            message=str(e) or f"Could not reach backend service ({type(e).__name__})",
        ) from e


class DisabledBackendClient:
    """
    Sentinel returned by the factory when credentials are missing.

    `require_backend_client` refuses it before any route runs; `table()`
    refuses as well, so a query can never reach the network.
    """

    def table(self, name: str):
        raise ConfigurationError(context={"table": name})


BackendClient = Union[AsyncClient, DisabledBackendClient]
