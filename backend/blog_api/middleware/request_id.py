"""
Blog API Backend: Request ID Middleware
========================================

What:  Assigns an ID to each request and echoes it in X-Request-ID.
How:   Reuses a client-supplied X-Request-ID when it is a short token
       (letters, digits, `.`, `_`, `-`; at most 64 chars), otherwise
       generates 8 hex chars. The ID lives in a ContextVar so every log
       line and exception handler for the request can include it.
When:  Outermost middleware, so every later log line can be correlated.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(incoming: Optional[str]) -> str:
    """Client-supplied ID if it is safe to log verbatim, else a fresh one."""
    if incoming and _CLIENT_ID_PATTERN.match(incoming):
        return incoming
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = request_id_var.set(resolve_request_id(request.headers.get(REQUEST_ID_HEADER)))
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id_var.get()
        finally:
            request_id_var.reset(token)
        return response
