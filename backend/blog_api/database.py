"""
Blog API Backend: Backend Client Factory
=========================================

What:  Builds the process-wide supabase-py client and exposes it to routes
       through FastAPI dependencies.
How:   `get_backend_client()` lazily creates one client per process and
       memoizes it. `require_backend_client()` is what routes depend on: it
       turns the disabled sentinel into a ConfigurationError (HTTP 500)
       before any query is attempted.
When:  Client is created on the first data request; closed at shutdown.

Example usage in a route:
    @router.get("/categories")
    async def list_categories(client: AsyncClient = Depends(require_backend_client)):
        ...
"""

import logging
from typing import Optional

from fastapi import Depends
from supabase import AsyncClient, AsyncClientOptions, acreate_client

from blog_api.config import Settings, settings
from blog_api.exceptions import ConfigurationError
from blog_api.supabase_client import BackendClient, DisabledBackendClient

logger = logging.getLogger(__name__)

_client: Optional[BackendClient] = None


async def create_backend_client(config: Optional[Settings] = None) -> BackendClient:
    """
    Construct a client from configuration.

    Returns a DisabledBackendClient when either the URL or the key is
    absent; never raises for missing credentials.
    """
    config = config or settings
    if not config.supabase_configured:
        logger.warning("Supabase credentials not found. API routes will fail.")
        return DisabledBackendClient()

    client = await acreate_client(
        config.supabase_url,
        config.supabase_anon_key,
        options=AsyncClientOptions(
            postgrest_client_timeout=config.supabase_timeout,
            auto_refresh_token=False,
            persist_session=False,
        ),
    )
    logger.info("Supabase client initialized for %s", config.supabase_url)
    return client


async def get_backend_client() -> BackendClient:
    """Return the memoized process-wide client, creating it on first use."""
    global _client
    if _client is None:
        _client = await create_backend_client()
    return _client


def require_backend_client(
    client: BackendClient = Depends(get_backend_client),
) -> AsyncClient:
    """
    FastAPI dependency for every data-accessing route.

    Raises:
        ConfigurationError: credentials are missing; no network call is made.
    """
    if isinstance(client, DisabledBackendClient):
        raise ConfigurationError()
    return client


async def close_backend_client() -> None:
    """
    What:  Closes the PostgREST connection pool of the memoized client.
    When:  Called during application shutdown (lifespan handler).
    """
    global _client
    if isinstance(_client, AsyncClient):
        await _client.postgrest.aclose()
    _client = None
