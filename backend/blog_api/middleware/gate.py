"""
Blog API Backend: Request Gate Middleware
==========================================

What:  The part of the request-handling contract every endpoint shares.
How:   For each request, in order:
         1. Look up the methods the matched route accepts in the app's
            route table.
         2. OPTIONS → 200 with an empty body (preflight), nothing else runs.
         3. Method not in the route's set → 405 error envelope, nothing
            else runs.
         4. Otherwise pass the request on.
       Cross-origin headers are then set on whatever response came back,
       including 4xx/5xx and the fallback for unhandled exceptions.
When:  Innermost of the custom middleware, directly in front of routing, so
       its short-circuit responses still get a request ID and an access log.

Why not CORSMiddleware:
    Starlette's CORSMiddleware only answers OPTIONS requests that carry an
    Origin and Access-Control-Request-Method header; every other OPTIONS
    would fall through to routing and come back 405. Clients of this API
    expect a bare 200 for any OPTIONS.
"""

import logging
from typing import List, Optional, Set

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Match

from blog_api.middleware.request_id import request_id_var
from blog_api.schemas.envelope import error_body

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CANDIDATE_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE")


class RequestGateMiddleware(BaseHTTPMiddleware):
    """
    Applies CORS headers, preflight short-circuit and method gating.

    Args:
        allow_origin:  value for Access-Control-Allow-Origin ("*" or one origin)
        allow_headers: request headers a browser may send cross-origin
    """

    def __init__(self, app, allow_origin: str = "*", allow_headers: Optional[List[str]] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.allow_origin = allow_origin
        self.allow_headers = allow_headers or ["Authorization", "Content-Type"]

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        allowed = self.allowed_methods(request)

        if request.method == "OPTIONS":
            response = Response(status_code=200)
        elif allowed is not None and request.method not in allowed:
            response = JSONResponse(
                status_code=405,
                content=error_body("Method not allowed"),
                headers={"Allow": ", ".join(sorted(allowed))},
            )
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    "[%s] Unexpected error on %s %s: %s",
                    request_id_var.get(""),
                    request.method,
                    request.url.path,
                    str(exc),
                    exc_info=True,
                )
                response = JSONResponse(status_code=500, content=error_body("Internal server error"))

        self.apply_cors_headers(response, allowed)
        return response

    def allowed_methods(self, request: Request) -> Optional[Set[str]]:
        """
        Methods accepted by the routes whose path matches this request.

        Asks each top-level route whether it would take the request under
        every candidate method: FULL means that method is routed, PARTIAL
        means the path matched under some other method. Included routers
        answer through the same `matches()` call as plain routes.

        Returns None when no route matches; routing then answers 404.
        """
        app = request.scope.get("app")
        router = getattr(app, "router", None)
        if router is None:
            return None

        matched = False
        methods: Set[str] = set()
        for method in CANDIDATE_METHODS:
            scope = dict(request.scope, method=method)
            for route in router.routes:
                match, _ = route.matches(scope)
                if match == Match.FULL:
                    methods.add(method)
                    matched = True
                    break
                if match == Match.PARTIAL:
                    matched = True
        return methods if matched else None

    def apply_cors_headers(self, response: Response, allowed: Optional[Set[str]]) -> None:
        if allowed is None:
            methods = DEFAULT_ALLOWED_METHODS
        else:
            methods = sorted(allowed | {"OPTIONS"})

        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = ",".join(methods)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(self.allow_headers)
        if self.allow_origin != "*":
            response.headers["Vary"] = "Origin"
