# Middleware package init
"""
Blog API Backend: Middleware Package
=====================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [Request Gate] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID header
    2. Logging: logs method, path, status and duration, including the
       gate's own 405 and preflight responses
    3. Request Gate: CORS headers, OPTIONS short-circuit, method gating
"""
