"""
Blog API Backend: Health Check Route
=====================================

What:  Liveness endpoint for load balancers and uptime monitors.
How:   Returns a fixed status plus the current UTC time. It does
       not call the backend service, so it answers even when Supabase
       credentials are missing or the backend is down.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from blog_api.schemas.envelope import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
@router.get("/api/health", response_model=HealthResponse, include_in_schema=False)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
