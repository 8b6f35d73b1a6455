"""
Blog API Backend: Response Envelope Schemas
============================================

What:  The uniform JSON shape returned by every API handler.
How:   Two explicit variants discriminated by `success`:

           SuccessEnvelope  → { "success": true,  "data": ... }
           ErrorEnvelope    → { "success": false, "error": "..." }

       Paginated listings extend the success variant with `pagination`.
       The health check is the one route outside the envelope.
"""

from typing import Generic, List, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessEnvelope(BaseModel, Generic[T]):
    """Successful response carrying the query result in `data`."""

    success: Literal[True] = True
    data: T


class MessageEnvelope(SuccessEnvelope[T], Generic[T]):
    """Success envelope with a one-line summary, used by bulk operations."""

    message: str = Field(description="Summary of what was done")


class Pagination(BaseModel):
    page: int = Field(description="1-based page number that was returned")
    limit: int = Field(description="Page size that was requested")
    total: int = Field(description="Total rows matching the filters")
    pages: int = Field(description="Number of pages at this page size")


class PaginatedEnvelope(BaseModel, Generic[T]):
    """Successful listing with page metadata."""

    success: Literal[True] = True
    data: List[T]
    pagination: Pagination


class ErrorEnvelope(BaseModel):
    """
    Failed response. `error` is a human readable message; for backend
    failures it is the backend's own message.
    """

    success: Literal[False] = False
    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    message: str = Field(default="Server is running")
    timestamp: str = Field(description="Current server time, ISO 8601 (UTC)")


def error_body(message: str) -> dict:
    """Serialized ErrorEnvelope, ready for a JSONResponse."""
    return ErrorEnvelope(error=message).model_dump()
