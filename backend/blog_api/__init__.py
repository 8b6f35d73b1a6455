"""
Blog API Backend: Application Package Initializer
==================================================

What: Marks the `blog_api` directory as a Python package.
Who:  Used by uvicorn (`blog_api.main:app`), pytest, and the `blog-api` script.

Architecture Note:
    The backend is a thin proxy in front of a hosted Supabase project:

    ┌─────────────────────────────────────┐
    │     Middleware (request gate)       │  ← CORS, preflight, method gating
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Queries)          │  ← One backend query per operation
    ├─────────────────────────────────────┤
    │     Backend client (PostgREST)      │  ← httpx against <SUPABASE_URL>/rest/v1
    └─────────────────────────────────────┘

    No layer keeps state between requests; all persistence lives in the
    backend service.
"""

__version__ = "1.0.0"
