"""
Blog API Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{ success: false, error }` envelope with the right status.
Who:   Raised by services, dependencies and middleware; caught by handlers.

Exception Hierarchy:
    BlogAPIError (base)                  → 500
    ├── ConfigurationError               → 500 (Supabase credentials missing)
    ├── BackendQueryError                → 500 (backend rejected the query)
    ├── ValidationError                  → 400
    ├── UnauthorizedError                → 401
    ├── ForbiddenError                   → 403
    └── NotFoundError                    → 404
"""

from typing import Any, Dict, Optional


class BlogAPIError(Exception):
    """
    Base exception for all Blog API errors.

    Attributes:
        message:  Error description returned in the envelope's `error` field
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConfigurationError(BlogAPIError):
    """
    Raised when the backend client is requested but credentials are absent.

    Surfaced before any network call is attempted.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Server configuration error: Missing Supabase credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class BackendQueryError(BlogAPIError):
    """
    Raised when the backend service rejects or fails a query.

    The backend's own message is passed through to the client, matching the
    way the front end displays Supabase errors. `code` holds the PostgREST
    error code when one was returned (e.g. PGRST116 for "no rows" on a
    single-row read) so services can translate it into a NotFoundError.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Backend query failed",
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if code:
            ctx["code"] = code
        super().__init__(message=message, context=ctx)
        self.code = code


class ValidationError(BlogAPIError):
    """Client input failed validation; the client can fix it and retry."""

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(BlogAPIError):
    """The request did not identify a user where one is required."""

    status_code = 401

    def __init__(
        self,
        message: str = "User ID required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(BlogAPIError):
    """The operation is not allowed in the current environment."""

    status_code = 403

    def __init__(
        self,
        message: str = "Forbidden",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BlogAPIError):
    """
    Raised when a requested row does not exist.

    Message format follows the resource name: "Post not found",
    "User not found".
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)

